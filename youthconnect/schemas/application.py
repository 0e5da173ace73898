"""Job application Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ApplicationResponse(BaseModel):
    """Stored application as returned after submission."""
    id: UUID
    job_id: UUID
    user_id: str
    full_name: str
    email: str
    phone: str
    location: Optional[str] = None
    experience: Optional[str] = None
    skills: Optional[str] = None
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    status: str
    applied_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicationSummary(BaseModel):
    """Row in the "my applications" list."""
    id: UUID
    job_id: UUID
    job_title: str
    company: str
    status: str
    applied_at: datetime


class ApplicationForm(BaseModel):
    """Fields of the application form, as typed by the applicant."""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    cover_letter: str = ""
    experience: str = ""
    skills: str = ""

    def missing_fields(self) -> list[str]:
        """Required fields left blank, in form order."""
        required = ("full_name", "email", "phone")
        return [name for name in required if not getattr(self, name).strip()]
