from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "jobly"
    db_password: str = "jobly"
    db_name: str = "jobly"
    db_pool_min_size: int = 5
    db_pool_max_size: int = 20
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        """SQLAlchemy용 접속 URL"""
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


settings = Settings()
