"""Database models"""
from youthconnect.models.user import User
from youthconnect.models.job import Job, JobType, ExperienceLevel
from youthconnect.models.career_guide import CareerGuide, GuideCategory
from youthconnect.models.job_application import JobApplication, ApplicationStatus
from youthconnect.models.job_alert import JobAlert

__all__ = [
    "User",
    "Job",
    "JobType",
    "ExperienceLevel",
    "CareerGuide",
    "GuideCategory",
    "JobApplication",
    "ApplicationStatus",
    "JobAlert",
]
