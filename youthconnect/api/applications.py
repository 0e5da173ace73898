"""
Job application endpoints.

Applications are multipart forms: contact fields, cover letter and a resume
file. Validation happens before anything is uploaded:
- full name, email and phone are required
- a resume is required
- the resume must be PDF/DOC/DOCX and at most 5MB
"""
import logging
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.api.auth import get_current_user, get_optional_user
from youthconnect.api.jobs import get_active_job
from youthconnect.database import get_db
from youthconnect.models.user import User
from youthconnect.schemas.application import (
    ApplicationForm,
    ApplicationResponse,
    ApplicationSummary
)
from youthconnect.services.applications import submit_application, list_applications
from youthconnect.services.email import email_service
from youthconnect.services.resume import (
    ResumeValidationError,
    max_resume_bytes,
    validate_resume
)
from youthconnect.services.storage import ResumeStorage, StorageError, get_resume_storage

logger = logging.getLogger(__name__)

router = APIRouter()

SUBMIT_FAILED_MESSAGE = "There was an error submitting your application. Please try again."


def form_error(code: str, title: str, message: str) -> HTTPException:
    """400 with a machine-readable code the client can tell apart."""
    return HTTPException(
        status_code=400,
        detail={"code": code, "title": title, "message": message}
    )


@router.post("/jobs/{job_id}/applications", response_model=ApplicationResponse, status_code=201)
async def apply_to_job(
    job_id: UUID,
    full_name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    location: str = Form(""),
    cover_letter: str = Form(""),
    experience: str = Form(""),
    skills: str = Form(""),
    resume: Optional[UploadFile] = File(None),
    current_user: Optional[User] = Depends(get_optional_user),
    storage: ResumeStorage = Depends(get_resume_storage),
    db: AsyncSession = Depends(get_db)
):
    """
    Submit an application for an active job.

    Signed-in users apply under their user id; anonymous applicants get a
    generated guest id.

    Returns:
        201: Application stored
        400: Missing field, missing resume, wrong file type or file too large
        404: Job not found or no longer active
        500: Upload or insert failed
    """
    form = ApplicationForm(
        full_name=full_name,
        email=email,
        phone=phone,
        location=location,
        cover_letter=cover_letter,
        experience=experience,
        skills=skills
    )

    missing = form.missing_fields()
    if missing:
        logger.warning(f"Application for job {job_id} missing fields: {missing}")
        raise form_error("missing_fields", "Missing required fields", "Please fill in all required fields.")

    if resume is None or not resume.filename:
        raise form_error("resume_required", "Resume required", "Please upload your resume.")

    # Read at most one byte past the limit; that is enough to know it is too large
    content = await resume.read(max_resume_bytes() + 1)
    try:
        validate_resume(resume.filename, resume.content_type, len(content))
    except ResumeValidationError as e:
        raise form_error(e.reason.value, e.title, e.message)

    job = await get_active_job(db, job_id)

    applicant_id = str(current_user.id) if current_user else f"guest_{uuid4().hex}"

    try:
        application = await submit_application(
            db,
            storage,
            job,
            applicant_id,
            form,
            resume.filename,
            content,
            resume.content_type
        )
    except (StorageError, SQLAlchemyError) as e:
        logger.error(f"Error submitting application for job {job_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=SUBMIT_FAILED_MESSAGE)

    await email_service.send_application_receipt(form.email.strip(), job.title, job.company)

    return application


@router.get("/applications", response_model=List[ApplicationSummary])
async def my_applications(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Applications submitted by the signed-in user."""
    applications = await list_applications(db, str(current_user.id))
    return [
        ApplicationSummary(
            id=application.id,
            job_id=application.job_id,
            job_title=application.job.title,
            company=application.job.company,
            status=application.status,
            applied_at=application.applied_at
        )
        for application in applications
    ]
