"""
Search/filter query builder.

Every searchable entity is described once by a SearchFields record. The
same description drives two renderings with identical semantics:

- build_statement(): a SQLAlchemy SELECT for the data service
  (equality, ILIKE substring match, ordering, limit)
- apply_criteria(): the same filter over records already in memory

Rules shared by both:
- blank criteria are unset and do not filter
- free text matches if ANY text field contains it (case-insensitive)
- substring criteria (location) match case-insensitively
- exact criteria (job type, category, experience level) must be equal
- everything supplied is AND-ed together
- only active records are returned, newest first
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel
from sqlalchemy import Select, and_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.database import BackendUnavailableError
from youthconnect.models.career_guide import CareerGuide
from youthconnect.models.job import Job

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class SearchFields:
    """Which columns each kind of criterion applies to for one entity."""
    model: type
    text_fields: Tuple[str, ...]
    substring_fields: Dict[str, str] = field(default_factory=dict)
    exact_fields: Dict[str, str] = field(default_factory=dict)
    active_field: Optional[str] = "is_active"
    order_field: str = "created_at"
    text_criterion: str = "q"


JOB_SEARCH = SearchFields(
    model=Job,
    text_fields=("title", "company", "description"),
    substring_fields={"location": "location"},
    exact_fields={"job_type": "job_type", "experience_level": "experience_level"},
)

GUIDE_SEARCH = SearchFields(
    model=CareerGuide,
    text_fields=("title", "category", "content"),
    exact_fields={"category": "category"},
    active_field=None,  # guides have no active flag
)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def normalize_criteria(criteria: BaseModel | Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Reduce criteria to the values that actually filter.

    Strings are stripped and blank strings dropped, enum members become
    their values. The result only depends on the criteria themselves.
    """
    if criteria is None:
        return {}
    raw = criteria.model_dump() if isinstance(criteria, BaseModel) else dict(criteria)

    values = {}
    for name, value in raw.items():
        value = _plain(value)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        if value is None:
            continue
        values[name] = value
    return values


def _text_terms(fields: SearchFields, values: Dict[str, Any], keywords: Optional[Iterable[str]]) -> List[str]:
    terms = []
    if fields.text_criterion in values:
        terms.append(values[fields.text_criterion])
    for keyword in keywords or ():
        keyword = (keyword or "").strip()
        if keyword:
            terms.append(keyword)
    return terms


def like_pattern(term: str) -> str:
    """Substring LIKE pattern with the user's own wildcards escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def build_statement(
    fields: SearchFields,
    criteria: BaseModel | Dict[str, Any] | None = None,
    *,
    keywords: Optional[Iterable[str]] = None,
    limit: Optional[int] = None,
) -> Select:
    """
    Compose the SELECT for a search.

    Args:
        fields: Entity search description (JOB_SEARCH, GUIDE_SEARCH)
        criteria: Optional criteria model or mapping
        keywords: Extra free-text terms; a record matches if any term matches
        limit: Maximum number of rows after ordering
    """
    model = fields.model
    values = normalize_criteria(criteria)

    conditions = []
    if fields.active_field:
        conditions.append(getattr(model, fields.active_field).is_(True))

    terms = _text_terms(fields, values, keywords)
    if terms:
        conditions.append(or_(*[
            getattr(model, column).ilike(like_pattern(term), escape=LIKE_ESCAPE)
            for term in terms
            for column in fields.text_fields
        ]))

    for name, column in fields.substring_fields.items():
        if name in values:
            conditions.append(
                getattr(model, column).ilike(like_pattern(values[name]), escape=LIKE_ESCAPE)
            )

    for name, column in fields.exact_fields.items():
        if name in values:
            conditions.append(getattr(model, column) == values[name])

    query = select(model)
    if conditions:
        query = query.where(and_(*conditions))
    query = query.order_by(getattr(model, fields.order_field).desc())
    if limit is not None:
        query = query.limit(limit)
    return query


def _get(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _contains(haystack: Any, needle: str) -> bool:
    if haystack is None:
        return False
    return needle.lower() in str(haystack).lower()


def matches(
    fields: SearchFields,
    record: Any,
    criteria: BaseModel | Dict[str, Any] | None = None,
    *,
    keywords: Optional[Iterable[str]] = None,
) -> bool:
    """In-memory equivalent of the WHERE clause built by build_statement()."""
    values = normalize_criteria(criteria)

    # Records without an explicit flag come from an already-active base set
    if fields.active_field and _get(record, fields.active_field) is False:
        return False

    terms = _text_terms(fields, values, keywords)
    if terms and not any(
        _contains(_get(record, column), term)
        for term in terms
        for column in fields.text_fields
    ):
        return False

    for name, column in fields.substring_fields.items():
        if name in values and not _contains(_get(record, column), values[name]):
            return False

    for name, column in fields.exact_fields.items():
        if name in values and _plain(_get(record, column)) != values[name]:
            return False

    return True


def apply_criteria(
    fields: SearchFields,
    records: Sequence[Any],
    criteria: BaseModel | Dict[str, Any] | None = None,
    *,
    keywords: Optional[Iterable[str]] = None,
    limit: Optional[int] = None,
) -> List[Any]:
    """Filter and order an in-memory record set, newest first."""
    selected = [
        record for record in records
        if matches(fields, record, criteria, keywords=keywords)
    ]

    def recency(record):
        created = _get(record, fields.order_field)
        return (created is not None, created or datetime.min)

    # sorted() is stable, so equal timestamps keep their incoming order
    ordered = sorted(selected, key=recency, reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


async def run_search(
    db: AsyncSession,
    fields: SearchFields,
    criteria: BaseModel | Dict[str, Any] | None = None,
    *,
    keywords: Optional[Iterable[str]] = None,
    limit: Optional[int] = None,
) -> List[Any]:
    """
    Execute a search against the data service.

    Raises:
        BackendUnavailableError: If the query fails
    """
    query = build_statement(fields, criteria, keywords=keywords, limit=limit)
    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logger.error(f"Search on {fields.model.__tablename__} failed: {str(e)}", exc_info=True)
        raise BackendUnavailableError(f"Failed to query {fields.model.__tablename__}") from e

    records = list(result.scalars().unique().all())
    logger.info(
        f"Search on {fields.model.__tablename__} returned {len(records)} rows "
        f"(criteria: {normalize_criteria(criteria)})"
    )
    return records
