"""
Career guidance API endpoints.
Read-only browser over the static guide library.
"""
import logging
from typing import Optional, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from youthconnect.database import get_db, BackendUnavailableError
from youthconnect.models.career_guide import CareerGuide, GuideCategory
from youthconnect.schemas.guidance import GuideSearchCriteria, CareerGuideResponse
from youthconnect.services.search import GUIDE_SEARCH, run_search

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[CareerGuideResponse])
async def search_guides(
    q: Optional[str] = Query(None, description="Matches title, category or content"),
    category: Optional[GuideCategory] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Search career guides, newest first."""
    criteria = GuideSearchCriteria(q=q, category=category)
    return await run_search(db, GUIDE_SEARCH, criteria)


@router.get("/categories", response_model=List[str])
async def list_categories():
    """The fixed set of guide categories, in display order."""
    return [category.value for category in GuideCategory]


@router.get("/{guide_id}", response_model=CareerGuideResponse)
async def get_guide(
    guide_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    try:
        result = await db.execute(
            select(CareerGuide).where(CareerGuide.id == guide_id)
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to load career guide {guide_id}: {str(e)}", exc_info=True)
        raise BackendUnavailableError("Failed to load career guide") from e
    guide = result.scalar_one_or_none()
    if not guide:
        raise HTTPException(status_code=404, detail="Career guide not found")
    return guide
