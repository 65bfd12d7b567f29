from pydantic import ConfigDict, model_validator

from schemas.commons import CamelModel, CompanyHandle, Count, Name


class CompanyDetail(CamelModel):
    """DB row 그대로 응답 (입력 제약은 UpdateRequest에만 적용)"""
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    description: str | None = None
    num_employees: Count | None = None
    logo_url: str | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        """
        PATCH 요청에서 "미전송"과 "명시적 null 전송"을 구분하기 위해
        model_fields_set 기준으로 검사 (빈 요청은 SET 절 생성 단계에서 400 처리)
        """
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name은 null로 설정할 수 없습니다.")
        if "description" in self.model_fields_set and self.description is None:
            raise ValueError("description은 null로 설정할 수 없습니다.")
        return self
