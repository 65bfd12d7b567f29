from typing import Annotated

import asyncpg
from fastapi import Depends, Path
from pydantic import Field, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from utils.database import get_connection

HANDLE_PATTERN = r"^[a-z0-9-]{1,25}$"

CompanyHandle = Annotated[
    str,
    Field(
        pattern=HANDLE_PATTERN,
        description="회사 핸들",
        examples=["ibm"],
    ),
]

# path parameter용 (FastAPI는 path에 Path()만 허용)
CompanyHandlePath = Annotated[str, Path(pattern=HANDLE_PATTERN, description="회사 핸들")]
JobIdPath = Annotated[int, Path(ge=1, description="채용공고 ID")]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]
Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Count = Annotated[int, Field(ge=0)]

CurrentConnection = Annotated[asyncpg.Connection, Depends(get_connection)]


class CamelModel(BaseModel):
    """JSON은 camelCase, 파이썬 속성은 snake_case"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
