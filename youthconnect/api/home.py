"""
Front page endpoint.

Stats and feature cards are static marketing copy; latest jobs are live.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.database import get_db
from youthconnect.schemas.home import Feature, HomeResponse, Stat
from youthconnect.services.search import JOB_SEARCH, run_search

logger = logging.getLogger(__name__)

router = APIRouter()

LATEST_JOBS_LIMIT = 6

STATS = [
    Stat(value="10K+", label="Active Jobs"),
    Stat(value="500+", label="Companies"),
    Stat(value="50K+", label="Job Seekers"),
    Stat(value="95%", label="Success Rate"),
]

FEATURES = [
    Feature(
        title="Local Job Discovery",
        description="Find jobs in your city with our location-based search and interactive job map.",
        link="/jobs",
    ),
    Feature(
        title="Career Guidance",
        description="Get expert advice on career paths, skill development, and industry insights.",
        link="/career-guidance",
    ),
    Feature(
        title="AI Assistant",
        description="Chat with our AI assistant for personalized job recommendations and career advice.",
        link="/chatbot",
    ),
    Feature(
        title="Multi-Language Support",
        description="Access the platform in your preferred language for better understanding.",
    ),
    Feature(
        title="Resume Builder",
        description="Create professional resumes with our easy-to-use resume builder and templates.",
    ),
    Feature(
        title="Real-time Alerts",
        description="Get instant notifications for new jobs matching your preferences and skills.",
        link="/alerts",
    ),
]


@router.get("/home", response_model=HomeResponse)
async def home(
    db: AsyncSession = Depends(get_db)
):
    """Front page content with the six most recent active jobs."""
    latest_jobs = await run_search(db, JOB_SEARCH, limit=LATEST_JOBS_LIMIT)
    return HomeResponse(stats=STATS, features=FEATURES, latest_jobs=latest_jobs)
