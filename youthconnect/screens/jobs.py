"""Job listing and job detail screens."""
import logging
from typing import List, Optional
from uuid import UUID

from youthconnect.client import JobBoardClient
from youthconnect.schemas.job import JobResponse, JobSearchCriteria, JobSummary
from youthconnect.schemas.share import ShareMenu
from youthconnect.screens.base import Favorites, Screen, SearchScreen, find_result
from youthconnect.services.share import build_share_menu

logger = logging.getLogger(__name__)


class JobListScreen(SearchScreen[JobSearchCriteria]):
    """
    Searchable job list.

    State: criteria (free text, location, job type, experience level),
    results, liked jobs and the open share menu.
    """
    criteria_model = JobSearchCriteria
    error_message = "Failed to load jobs. Please try again."

    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.favorites = Favorites()
        self.share_menu: Optional[ShareMenu] = None

    async def fetch(self, criteria: JobSearchCriteria) -> List[JobSummary]:
        return await self.client.search_jobs(criteria)

    def toggle_like(self, job_id: UUID) -> None:
        notice = self.favorites.toggle(job_id)
        self.notices.append(notice)

    def open_share(self, job_id: UUID) -> Optional[ShareMenu]:
        job = find_result(self.results, job_id)
        if job is None:
            return None
        self.share_menu = build_share_menu(job.title, job.company)
        return self.share_menu

    def close_share(self) -> None:
        self.share_menu = None


class JobDetailScreen(Screen):
    """A single job with save, share and apply actions."""

    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.job: Optional[JobResponse] = None
        self.is_liked = False
        self.share_menu: Optional[ShareMenu] = None
        self.redirect_to: Optional[str] = None

    def _set_job(self, job: JobResponse) -> None:
        self.job = job

    async def load(self, job_id: UUID) -> bool:
        loaded = await self._load(
            lambda: self.client.get_job(job_id),
            self._set_job,
            "Failed to load job details. Please try again.",
        )
        if not loaded and self.job is None and not self.is_loading:
            # Unknown or inactive job: send the user back to the listing
            self.redirect_to = "/jobs"
        return loaded

    def toggle_like(self) -> None:
        self.is_liked = not self.is_liked
        if self.is_liked:
            self.notify("Added to favorites", "Job added to your favorites.")
        else:
            self.notify("Removed from favorites", "Job removed from your favorites.")

    def open_share(self) -> Optional[ShareMenu]:
        if self.job is None:
            return None
        self.share_menu = build_share_menu(self.job.title, self.job.company)
        return self.share_menu

    def close_share(self) -> None:
        self.share_menu = None

    def apply_path(self) -> Optional[str]:
        return f"/apply/{self.job.id}" if self.job else None

    def formatted_deadline(self) -> Optional[str]:
        """Deadline as "15 August 2025", or None when there is none."""
        if self.job is None or self.job.application_deadline is None:
            return None
        deadline = self.job.application_deadline
        return f"{deadline.day} {deadline.strftime('%B %Y')}"
