"""Career guidance browser screen."""
from typing import List, Optional

from youthconnect.models.career_guide import GuideCategory
from youthconnect.schemas.guidance import CareerGuideResponse, GuideSearchCriteria
from youthconnect.screens.base import SearchScreen

CATEGORIES = [category.value for category in GuideCategory]


class CareerGuidanceScreen(SearchScreen[GuideSearchCriteria]):
    """Guide list with free-text search and category filter, plus a detail view."""
    criteria_model = GuideSearchCriteria
    error_message = "Failed to load career guidance. Please try again."
    categories = CATEGORIES

    selected_guide: Optional[CareerGuideResponse] = None

    async def fetch(self, criteria: GuideSearchCriteria) -> List[CareerGuideResponse]:
        return await self.client.search_guides(criteria)

    def select_guide(self, guide: CareerGuideResponse) -> None:
        self.selected_guide = guide

    def back_to_list(self) -> None:
        self.selected_guide = None
