# career_guide/routers/saved_jobs.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.errors import error_response
from career_guide.db.database import get_db
from career_guide.db.models import SavedJob, User
from career_guide.dependencies import get_current_user
from career_guide.schemas.base import ErrorResponse
from career_guide.schemas.saved_job import (
    JOB_STATUSES,
    SaveJobRequest,
    SaveJobResponse,
    SavedJobListResponse,
    SavedJobResponse,
    UpdateJobStatusRequest,
    UpdateJobStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs/saved", tags=["Saved Jobs"])


async def _find_saved(db: AsyncSession, user_id: int, job_id: str) -> Optional[SavedJob]:
    return await db.scalar(
        select(SavedJob).where(and_(SavedJob.user_id == user_id, SavedJob.job_id == job_id))
    )


@router.get("", response_model=SavedJobListResponse)
async def list_saved_jobs(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Сохранённые вакансии (последние изменённые сверху)"""
    result = await db.execute(
        select(SavedJob)
        .where(SavedJob.user_id == current_user.id)
        .order_by(SavedJob.updated_at.desc())
    )
    return SavedJobListResponse(
        jobs=[SavedJobResponse.model_validate(j) for j in result.scalars().all()]
    )


@router.post("", response_model=SaveJobResponse, responses={400: {"model": ErrorResponse}})
async def save_job(
    request: SaveJobRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Сохранить вакансию. Повторное сохранение того же jobId
    возвращает уже существующую запись без изменений.
    """
    if not (request.job_id and request.title and request.company and request.url):
        return error_response(400, "Missing required fields")

    existing = await _find_saved(db, current_user.id, request.job_id)
    if existing:
        return SaveJobResponse(job=SavedJobResponse.model_validate(existing))

    job = SavedJob(
        user_id=current_user.id,
        job_id=request.job_id,
        title=request.title,
        company=request.company,
        location=request.location or "",
        url=request.url,
        source=request.source or "jsearch",
        status="saved",
    )
    db.add(job)
    try:
        await db.commit()
    except IntegrityError:
        # Параллельный запрос успел сохранить ту же вакансию
        await db.rollback()
        job = await _find_saved(db, current_user.id, request.job_id)
        if job is None:
            raise

    logger.info("User %s saved job %s", current_user.id, request.job_id)
    return SaveJobResponse(job=SavedJobResponse.model_validate(job))


@router.patch("", response_model=UpdateJobStatusResponse, responses={400: {"model": ErrorResponse}})
async def update_job_status(
    request: UpdateJobStatusRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Сменить статус отклика. Чужие и несуществующие записи дают updated=0"""
    if not request.id or request.status not in JOB_STATUSES:
        return error_response(400, "Invalid id or status")

    result = await db.execute(
        update(SavedJob)
        .where(and_(SavedJob.id == request.id, SavedJob.user_id == current_user.id))
        .values(status=request.status)
    )
    await db.commit()
    return UpdateJobStatusResponse(updated=result.rowcount)


@router.delete("", responses={400: {"model": ErrorResponse}})
async def delete_saved_job(
    id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not id:
        return error_response(400, "Missing id")

    await db.execute(
        delete(SavedJob).where(and_(SavedJob.id == id, SavedJob.user_id == current_user.id))
    )
    await db.commit()
    return {"ok": True}
