"""Career guidance Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from youthconnect.models.career_guide import GuideCategory
from youthconnect.schemas.job import blank_to_none


class GuideSearchCriteria(BaseModel):
    q: Optional[str] = None
    category: Optional[GuideCategory] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class CareerGuideResponse(BaseModel):
    id: UUID
    title: str
    category: str
    content: str
    skills_required: list[str] = []
    salary_info: Optional[str] = None
    growth_prospects: Optional[str] = None
    education_path: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("skills_required", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or []
