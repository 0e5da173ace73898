"""
Screen view-models.

Each screen owns its state (criteria, results, liked jobs, form fields,
notices) and talks to the API only through JobBoardClient.
"""
from youthconnect.screens.base import Notice, RequestTracker, Favorites
from youthconnect.screens.home import HomeScreen
from youthconnect.screens.jobs import JobListScreen, JobDetailScreen
from youthconnect.screens.application import ApplicationScreen
from youthconnect.screens.guidance import CareerGuidanceScreen
from youthconnect.screens.job_map import JobMapScreen
from youthconnect.screens.chat import ChatWidget
from youthconnect.screens.auth import AuthScreen

__all__ = [
    "Notice",
    "RequestTracker",
    "Favorites",
    "HomeScreen",
    "JobListScreen",
    "JobDetailScreen",
    "ApplicationScreen",
    "CareerGuidanceScreen",
    "JobMapScreen",
    "ChatWidget",
    "AuthScreen",
]
