"""
Shared screen state: notices, request tokens, liked jobs, searchable lists.

Overlapping fetches are resolved by request token: every load takes the
next token, and a response or failure whose token is no longer the latest
is dropped. A slow stale request can therefore never overwrite newer results.
"""
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, Set, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from youthconnect.client import ApiError, JobBoardClient

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=BaseModel)


class Notice(BaseModel):
    """A toast shown to the user."""
    title: str
    description: str
    variant: str = "default"  # default | destructive


class RequestTracker:
    """Hands out increasing request tokens and remembers the latest one."""

    def __init__(self):
        self._latest = 0

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_latest(self, token: int) -> bool:
        return token == self._latest


class Favorites:
    """Liked job ids, owned by one screen."""

    def __init__(self):
        self._liked: Set[UUID] = set()

    def is_liked(self, job_id: UUID) -> bool:
        return job_id in self._liked

    def toggle(self, job_id: UUID) -> Notice:
        if job_id in self._liked:
            self._liked.discard(job_id)
            return Notice(title="Removed from favorites", description="Job removed from your favorites.")
        self._liked.add(job_id)
        return Notice(title="Added to favorites", description="Job added to your favorites.")

    def __len__(self) -> int:
        return len(self._liked)


class Screen:
    """Base for all screens: loading flag, notices, guarded loads."""

    def __init__(self, client: JobBoardClient):
        self.client = client
        self.is_loading = False
        self.notices: List[Notice] = []
        self._requests = RequestTracker()

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notices.append(Notice(title=title, description=description, variant=variant))

    def pop_notices(self) -> List[Notice]:
        notices, self.notices = self.notices, []
        return notices

    async def _load(
        self,
        fetch: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
        error_message: str,
    ) -> bool:
        """
        Run one fetch and apply its result if it is still the latest.

        On failure the current state is kept and an error notice is added.
        Returns True when the result was applied.
        """
        token = self._requests.issue()
        self.is_loading = True
        try:
            data = await fetch()
        except ApiError as e:
            if not self._requests.is_latest(token):
                logger.debug(f"Dropping stale failure for request {token}: {e}")
                return False
            logger.error(f"{type(self).__name__} load failed: {e}")
            self.notify("Error", error_message, "destructive")
            self.is_loading = False
            return False

        if not self._requests.is_latest(token):
            logger.debug(f"Dropping stale response for request {token}")
            return False

        apply(data)
        self.is_loading = False
        return True


class SearchScreen(Screen, Generic[C]):
    """
    A result list re-derived from criteria.

    Subclasses set criteria_model and error_message and implement fetch().
    """
    criteria_model: Type[C]
    error_message = "Failed to load. Please try again."

    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.criteria: C = self.criteria_model()
        self.results: List[Any] = []

    async def fetch(self, criteria: C) -> List[Any]:
        raise NotImplementedError

    def _set_results(self, results: List[Any]) -> None:
        self.results = list(results)

    async def refresh(self) -> bool:
        criteria = self.criteria
        return await self._load(lambda: self.fetch(criteria), self._set_results, self.error_message)

    async def update_criteria(self, **changes) -> bool:
        """Change some criteria and reload. Blank values clear a filter."""
        values = self.criteria.model_dump()
        values.update(changes)
        self.criteria = self.criteria_model(**values)
        return await self.refresh()

    async def clear_filters(self) -> bool:
        self.criteria = self.criteria_model()
        return await self.refresh()


def find_result(results: List[Any], item_id: UUID) -> Optional[Any]:
    return next((item for item in results if item.id == item_id), None)
