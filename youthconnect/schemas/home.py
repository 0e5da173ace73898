"""Front page Pydantic schemas."""
from pydantic import BaseModel

from youthconnect.schemas.job import JobSummary


class Stat(BaseModel):
    value: str
    label: str


class Feature(BaseModel):
    title: str
    description: str
    link: str | None = None


class HomeResponse(BaseModel):
    stats: list[Stat]
    features: list[Feature]
    latest_jobs: list[JobSummary]
