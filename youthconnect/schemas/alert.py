"""Job alert Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from youthconnect.models.job import JobType, ExperienceLevel
from youthconnect.schemas.job import blank_to_none


class JobAlertCreate(BaseModel):
    keywords: list[str] = []
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    experience_level: Optional[ExperienceLevel] = None

    @field_validator("location", "job_type", "experience_level", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("keywords")
    @classmethod
    def _drop_blank_keywords(cls, value: list[str]) -> list[str]:
        return [keyword.strip() for keyword in value if keyword and keyword.strip()]


class JobAlertResponse(BaseModel):
    id: UUID
    keywords: list[str] = []
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("keywords", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or []
