from datetime import datetime
from enum import Enum
import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from youthconnect.database import Base
from youthconnect.database_types import GUID


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)

    # Applicant identifier: a user id, or a generated guest id for anonymous applicants
    user_id = Column(String, nullable=False, index=True)
    job_id = Column(GUID, ForeignKey("jobs.id"), nullable=False, index=True)

    # Applicant contact details from the form
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    location = Column(String(255), nullable=True)
    experience = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)

    cover_letter = Column(Text, nullable=True)
    resume_url = Column(String(500), nullable=True)  # opaque storage path

    status = Column(String, nullable=False, default=ApplicationStatus.PENDING.value)
    applied_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    job = relationship("Job", lazy="joined")

    __table_args__ = (
        Index('idx_applications_user_applied', 'user_id', 'applied_at'),
    )
