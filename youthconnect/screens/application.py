"""
Application form screen.

The resume is checked locally when chosen, so a wrong type or oversized
file never leaves the browser. Submission re-checks required fields and the
resume presence before calling the API; the server validates again.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from youthconnect.client import ApiError, JobBoardClient
from youthconnect.schemas.application import ApplicationForm, ApplicationResponse
from youthconnect.schemas.job import JobResponse
from youthconnect.screens.base import Screen
from youthconnect.services.resume import REJECTION_MESSAGES, check_resume

logger = logging.getLogger(__name__)


@dataclass
class ChosenResume:
    filename: str
    content: bytes
    content_type: str


class ApplicationScreen(Screen):
    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.job: Optional[JobResponse] = None
        self.form = ApplicationForm()
        self.resume: Optional[ChosenResume] = None
        self.is_submitting = False
        self.submitted: Optional[ApplicationResponse] = None
        self.redirect_to: Optional[str] = None

    def _set_job(self, job: JobResponse) -> None:
        self.job = job

    async def load(self, job_id: UUID) -> bool:
        loaded = await self._load(
            lambda: self.client.get_job(job_id),
            self._set_job,
            "Failed to load job details. Please try again.",
        )
        if not loaded and self.job is None and not self.is_loading:
            self.redirect_to = "/jobs"
        return loaded

    def update_form(self, **changes) -> None:
        values = self.form.model_dump()
        values.update(changes)
        self.form = ApplicationForm(**values)

    def choose_resume(self, filename: str, content: bytes, content_type: str) -> bool:
        """
        Accept a candidate resume, or reject it with a notice.

        A rejected file leaves the previous choice in place.
        """
        reason = check_resume(content_type, len(content))
        if reason is not None:
            title, message = REJECTION_MESSAGES[reason]
            self.notify(title, message, "destructive")
            return False
        self.resume = ChosenResume(filename=filename, content=content, content_type=content_type)
        return True

    def clear_resume(self) -> None:
        self.resume = None

    async def submit(self) -> bool:
        if self.job is None or self.is_submitting:
            return False

        if self.form.missing_fields():
            self.notify("Missing required fields", "Please fill in all required fields.", "destructive")
            return False
        if self.resume is None:
            self.notify("Resume required", "Please upload your resume.", "destructive")
            return False

        self.is_submitting = True
        try:
            self.submitted = await self.client.apply(
                self.job.id,
                self.form,
                self.resume.filename,
                self.resume.content,
                self.resume.content_type,
            )
        except ApiError as e:
            logger.error(f"Application for job {self.job.id} failed: {e}")
            title = "Submission failed"
            message = "There was an error submitting your application. Please try again."
            if isinstance(e.detail, dict):
                title = e.detail.get("title", title)
                message = e.detail.get("message", message)
            self.notify(title, message, "destructive")
            return False
        finally:
            self.is_submitting = False

        self.notify(
            "Application submitted!",
            f"Your application for {self.job.title} has been submitted successfully.",
        )
        self.redirect_to = "/jobs"
        return True
