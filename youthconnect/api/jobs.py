"""
Jobs API endpoints.
Search, detail and share menu for active job postings.
"""
import logging
from typing import Optional, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from youthconnect.database import get_db, BackendUnavailableError
from youthconnect.models.job import Job, JobType, ExperienceLevel
from youthconnect.schemas.job import JobSearchCriteria, JobSummary, JobResponse
from youthconnect.schemas.share import ShareMenu
from youthconnect.services.search import JOB_SEARCH, run_search
from youthconnect.services.share import build_share_menu

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_PAGE_SIZE = 100


def job_search_criteria(
    q: Optional[str] = Query(None, description="Matches title, company or description"),
    location: Optional[str] = Query(None, description="Location substring"),
    job_type: Optional[JobType] = Query(None),
    experience_level: Optional[ExperienceLevel] = Query(None),
) -> JobSearchCriteria:
    """Collect search criteria from the query string."""
    return JobSearchCriteria(
        q=q,
        location=location,
        job_type=job_type,
        experience_level=experience_level
    )


async def get_active_job(db: AsyncSession, job_id: UUID) -> Job:
    """
    Fetch an active job by id.

    Raises:
        HTTPException 404: If the job does not exist or is inactive
        BackendUnavailableError: If the query fails
    """
    try:
        result = await db.execute(
            select(Job).where(Job.id == job_id, Job.is_active.is_(True))
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to load job {job_id}: {str(e)}", exc_info=True)
        raise BackendUnavailableError("Failed to load job") from e
    job = result.scalar_one_or_none()
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.get("/", response_model=List[JobSummary])
async def search_jobs(
    criteria: JobSearchCriteria = Depends(job_search_criteria),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    db: AsyncSession = Depends(get_db)
):
    """
    Search active job postings, newest first.

    Every filter is optional; empty values are ignored.
    """
    return await run_search(db, JOB_SEARCH, criteria, limit=limit)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Get an active job posting by ID."""
    return await get_active_job(db, job_id)


@router.get("/{job_id}/share", response_model=ShareMenu)
async def share_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Share links for a job: messaging, email and social."""
    job = await get_active_job(db, job_id)
    return build_share_menu(job.title, job.company)
