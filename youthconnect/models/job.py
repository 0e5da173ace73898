from datetime import datetime
from enum import Enum
import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, Date, Float, Index

from youthconnect.database import Base
from youthconnect.database_types import GUID, StringList


class JobType(str, Enum):
    """Employment type shown as a badge on job cards."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)

    # Listing details
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    salary_range = Column(String, nullable=True)  # free text, e.g. "₹4-6 LPA"
    job_type = Column(String, nullable=False)  # JobType value
    experience_level = Column(String, nullable=False)  # ExperienceLevel value

    # Body
    description = Column(Text, nullable=False)
    requirements = Column(StringList, nullable=True, default=list)
    benefits = Column(StringList, nullable=True, default=list)

    # Map pin (optional)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    application_deadline = Column(Date, nullable=True)

    # Only active jobs are visible anywhere in the app
    is_active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        # Listing query: active jobs, newest first
        Index('idx_jobs_active_created', 'is_active', 'created_at'),
    )
