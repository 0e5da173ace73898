"""Front page screen."""
from typing import List, Optional
from uuid import UUID

from youthconnect.client import JobBoardClient
from youthconnect.schemas.home import Feature, HomeResponse, Stat
from youthconnect.schemas.job import JobSearchCriteria, JobSummary
from youthconnect.schemas.share import ShareMenu
from youthconnect.screens.base import Favorites, Screen, find_result
from youthconnect.services.share import build_share_menu


class HomeScreen(Screen):
    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.stats: List[Stat] = []
        self.features: List[Feature] = []
        self.latest_jobs: List[JobSummary] = []
        self.search_query = ""
        self.favorites = Favorites()
        self.share_menu: Optional[ShareMenu] = None

    def _set_home(self, home: HomeResponse) -> None:
        self.stats = home.stats
        self.features = home.features
        self.latest_jobs = home.latest_jobs

    async def load(self) -> bool:
        return await self._load(self.client.home, self._set_home, "Failed to load jobs. Please try again.")

    def toggle_like(self, job_id: UUID) -> None:
        self.notices.append(self.favorites.toggle(job_id))

    def open_share(self, job_id: UUID) -> Optional[ShareMenu]:
        job = find_result(self.latest_jobs, job_id)
        if job is None:
            return None
        self.share_menu = build_share_menu(job.title, job.company)
        return self.share_menu

    def close_share(self) -> None:
        self.share_menu = None

    def job_search(self) -> JobSearchCriteria:
        """Criteria to open the job listing with, from the hero search box."""
        return JobSearchCriteria(q=self.search_query)
