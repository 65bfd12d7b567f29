from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, model_validator

from schemas.commons import CamelModel, CompanyHandle, Count, Title

Equity = Annotated[Decimal, Field(ge=0, le=1, description="지분율 (0 ~ 1)")]


class JobDetail(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str


class JobUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        if "company_handle" in self.model_fields_set and self.company_handle is None:
            raise ValueError("companyHandle은 null로 설정할 수 없습니다.")
        return self
