"""Job-related Pydantic schemas."""
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from youthconnect.models.job import JobType, ExperienceLevel


def blank_to_none(value):
    """Empty form/query strings mean "not set"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class JobSearchCriteria(BaseModel):
    """Optional filters for the job listing. Unset fields do not filter."""
    q: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    experience_level: Optional[ExperienceLevel] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    def is_empty(self) -> bool:
        return not any(value for value in self.model_dump().values())


class JobSummary(BaseModel):
    """Job card shown in listings."""
    id: UUID
    title: str
    company: str
    location: str
    salary_range: Optional[str] = None
    job_type: str
    experience_level: str
    description: str
    requirements: list[str] = []
    benefits: list[str] = []
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("requirements", "benefits", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or []


class JobResponse(JobSummary):
    """Full job detail."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    application_deadline: Optional[date] = None
    updated_at: datetime


class JobMapPin(BaseModel):
    """Job shown on the map view."""
    id: UUID
    title: str
    company: str
    location: str
    job_type: str
    latitude: float
    longitude: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
