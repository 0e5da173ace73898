"""
Job map API endpoint.

The map itself is a placeholder; this returns the pins it will show.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from youthconnect.database import get_db, BackendUnavailableError
from youthconnect.models.job import Job
from youthconnect.schemas.job import JobMapPin
from youthconnect.services.search import JOB_SEARCH, build_statement

logger = logging.getLogger(__name__)

router = APIRouter()

MAP_PIN_LIMIT = 20


@router.get("/", response_model=List[JobMapPin])
async def list_map_pins(
    db: AsyncSession = Depends(get_db)
):
    """Up to 20 active jobs that have coordinates, newest first."""
    query = (
        build_statement(JOB_SEARCH)
        .where(Job.latitude.is_not(None), Job.longitude.is_not(None))
        .limit(MAP_PIN_LIMIT)
    )
    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load map pins: {str(e)}", exc_info=True)
        raise BackendUnavailableError("Failed to load map pins") from e

    pins = result.scalars().all()
    logger.info(f"Listed {len(pins)} map pins")
    return pins
