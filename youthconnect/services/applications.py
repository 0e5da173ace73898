"""Job application submission."""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.models.job import Job
from youthconnect.models.job_application import JobApplication, ApplicationStatus
from youthconnect.schemas.application import ApplicationForm
from youthconnect.services.resume import build_resume_path
from youthconnect.services.storage import ResumeStorage

logger = logging.getLogger(__name__)


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


async def submit_application(
    db: AsyncSession,
    storage: ResumeStorage,
    job: Job,
    applicant_id: str,
    form: ApplicationForm,
    resume_filename: Optional[str],
    resume_content: bytes,
    resume_content_type: str,
) -> JobApplication:
    """
    Upload the (already validated) resume, then insert the application row.

    Raises:
        StorageError: If the upload fails; nothing is inserted
        SQLAlchemyError: If the insert fails; the session is rolled back
    """
    path = build_resume_path(applicant_id, resume_filename, resume_content_type)
    resume_url = await storage.upload(path, resume_content, resume_content_type)

    application = JobApplication(
        user_id=applicant_id,
        job_id=job.id,
        full_name=form.full_name.strip(),
        email=form.email.strip(),
        phone=form.phone.strip(),
        location=_optional(form.location),
        experience=_optional(form.experience),
        skills=_optional(form.skills),
        cover_letter=_optional(form.cover_letter),
        resume_url=resume_url,
        status=ApplicationStatus.PENDING.value,
    )
    db.add(application)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        logger.error(f"Insert failed for application to job {job.id}; resume left at {resume_url}")
        raise
    await db.refresh(application)

    logger.info(f"Application {application.id} submitted by {applicant_id} for job {job.id}: {job.title} at {job.company}")
    return application


async def list_applications(db: AsyncSession, applicant_id: str) -> List[JobApplication]:
    """Applications made by one applicant, newest first."""
    result = await db.execute(
        select(JobApplication)
        .where(JobApplication.user_id == applicant_id)
        .order_by(JobApplication.applied_at.desc())
    )
    return list(result.scalars().unique().all())
