"""
Job map screen.

The map is a placeholder; the screen lists pinned jobs. Pins are fetched
once and narrowed locally with the same query builder the server uses.
"""
from typing import List, Optional

from pydantic import BaseModel, field_validator

from youthconnect.client import JobBoardClient
from youthconnect.models.job import JobType
from youthconnect.schemas.job import JobMapPin, blank_to_none
from youthconnect.screens.base import Screen
from youthconnect.services.search import JOB_SEARCH, apply_criteria


class MapCriteria(BaseModel):
    q: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class JobMapScreen(Screen):
    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.pins: List[JobMapPin] = []
        self.criteria = MapCriteria()

    def _set_pins(self, pins: List[JobMapPin]) -> None:
        self.pins = list(pins)

    async def load(self) -> bool:
        return await self._load(self.client.map_pins, self._set_pins, "Failed to load jobs. Please try again.")

    @property
    def visible_pins(self) -> List[JobMapPin]:
        """Pins matching the current criteria, newest first."""
        return apply_criteria(JOB_SEARCH, self.pins, self.criteria)

    def update_criteria(self, **changes) -> List[JobMapPin]:
        values = self.criteria.model_dump()
        values.update(changes)
        self.criteria = MapCriteria(**values)
        return self.visible_pins

    def clear_filters(self) -> List[JobMapPin]:
        self.criteria = MapCriteria()
        return self.visible_pins
