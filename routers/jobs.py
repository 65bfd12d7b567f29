import logging

import asyncpg
from fastapi import APIRouter, HTTPException, status

from schemas.commons import JobIdPath, CurrentConnection
from schemas.job import JobDetail, JobUpdateRequest
from utils.query import build_update_query

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["JOBS"],
)

JOB_COLUMN_MAP = {
    "companyHandle": "company_handle",
}
JOB_RETURNING = "id, title, salary, equity, company_handle"


@router.patch("/jobs/{job_id}", response_model=JobDetail)
async def update_job(job_id: JobIdPath, update_data: JobUpdateRequest, conn: CurrentConnection) -> JobDetail:
    """채용공고 부분 수정"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    # job_id도 파라미터로 바인딩 ($n+1)
    query, params = build_update_query(
        "jobs",
        update_fields,
        JOB_COLUMN_MAP,
        key_column="id",
        key_value=job_id,
        returning=JOB_RETURNING,
    )
    logger.debug("Updating job %s: %s", job_id, list(update_fields))

    try:
        job = await conn.fetchrow(query, *params)
    except asyncpg.ForeignKeyViolationError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No company found with given companyHandle: {update_fields.get('companyHandle')}",
        )

    if job is None:
        logger.warning("Job not found: %s", job_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No job with id: {job_id}"
        )

    return JobDetail.model_validate(dict(job))
