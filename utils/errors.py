class InvalidArgumentError(ValueError):
    """잘못된 입력 (API에서는 400 Bad Request로 변환)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
