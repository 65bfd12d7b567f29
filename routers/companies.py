import logging

import asyncpg
from fastapi import APIRouter, HTTPException, status

from schemas.commons import CompanyHandlePath, CurrentConnection
from schemas.company import CompanyDetail, CompanyUpdateRequest
from utils.query import build_update_query

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["COMPANIES"],
)

# API 필드명 -> DB 컬럼 매핑 (동일한 이름은 생략)
COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
COMPANY_RETURNING = "handle, name, description, num_employees, logo_url"


@router.patch("/companies/{handle}", response_model=CompanyDetail)
async def update_company(
        handle: CompanyHandlePath, update_data: CompanyUpdateRequest, conn: CurrentConnection) -> CompanyDetail:
    """회사 정보 부분 수정"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    query, params = build_update_query(
        "companies",
        update_fields,
        COMPANY_COLUMN_MAP,
        key_column="handle",
        key_value=handle,
        returning=COMPANY_RETURNING,
    )
    logger.debug("Updating company %s: %s", handle, list(update_fields))

    try:
        company = await conn.fetchrow(query, *params)
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Company name already exists",
        )

    if company is None:
        logger.warning("Company not found: %s", handle)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found"
        )

    return CompanyDetail.model_validate(dict(company))
