"""
Job alert endpoints.

An alert is a saved search: keywords (any may match), location, job type
and experience level. Matching jobs are found with the same query builder
as the job listing.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.api.auth import get_current_user
from youthconnect.database import get_db
from youthconnect.models.job_alert import JobAlert
from youthconnect.models.user import User
from youthconnect.schemas.alert import JobAlertCreate, JobAlertResponse
from youthconnect.schemas.job import JobSearchCriteria, JobSummary
from youthconnect.services.search import JOB_SEARCH, run_search

logger = logging.getLogger(__name__)

router = APIRouter()

ALERT_MATCH_LIMIT = 50


@router.post("/", response_model=JobAlertResponse, status_code=201)
async def create_alert(
    alert: JobAlertCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Save a job alert for the signed-in user."""
    if not (alert.keywords or alert.location or alert.job_type or alert.experience_level):
        raise HTTPException(status_code=400, detail="An alert needs at least one keyword or filter")

    new_alert = JobAlert(
        user_id=str(current_user.id),
        keywords=alert.keywords,
        location=alert.location,
        job_type=alert.job_type.value if alert.job_type else None,
        experience_level=alert.experience_level.value if alert.experience_level else None,
        is_active=True
    )
    db.add(new_alert)
    await db.commit()
    await db.refresh(new_alert)

    logger.info(f"Created job alert {new_alert.id} for {current_user.email}")
    return new_alert


@router.get("/", response_model=List[JobAlertResponse])
async def list_alerts(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    result = await db.execute(
        select(JobAlert)
        .where(JobAlert.user_id == str(current_user.id))
        .order_by(JobAlert.created_at.desc())
    )
    return result.scalars().all()


@router.get("/{alert_id}/jobs", response_model=List[JobSummary])
async def alert_matches(
    alert_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Active jobs matching one of the user's alerts, newest first."""
    result = await db.execute(
        select(JobAlert).where(
            JobAlert.id == alert_id,
            JobAlert.user_id == str(current_user.id)
        )
    )
    alert = result.scalar_one_or_none()
    if not alert:
        raise HTTPException(status_code=404, detail="Alert not found")

    criteria = JobSearchCriteria(
        location=alert.location,
        job_type=alert.job_type,
        experience_level=alert.experience_level
    )
    return await run_search(
        db, JOB_SEARCH, criteria, keywords=alert.keywords, limit=ALERT_MATCH_LIMIT
    )
