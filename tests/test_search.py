"""
Tests for the search/filter query builder.

The in-memory and SQL renderings must agree, so most scenarios are checked
against both.
"""
from datetime import datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.database import BackendUnavailableError
from youthconnect.models.job import Job, JobType
from youthconnect.schemas.job import JobSearchCriteria
from youthconnect.schemas.guidance import GuideSearchCriteria
from youthconnect.services.search import (
    GUIDE_SEARCH,
    JOB_SEARCH,
    apply_criteria,
    build_statement,
    like_pattern,
    matches,
    normalize_criteria,
    run_search,
)

from conftest import make_job


def titles(records):
    return [record.title for record in records]


# ============================================================
# CRITERIA NORMALIZATION
# ============================================================

def test_normalize_drops_blank_and_whitespace_values():
    criteria = {"q": "  ", "location": "", "job_type": None, "experience_level": "entry"}
    assert normalize_criteria(criteria) == {"experience_level": "entry"}


def test_normalize_strips_strings_and_unwraps_enums():
    criteria = JobSearchCriteria(q="  react ", job_type=JobType.INTERNSHIP)
    assert normalize_criteria(criteria) == {"q": "react", "job_type": "internship"}


def test_criteria_model_treats_blank_strings_as_unset():
    criteria = JobSearchCriteria(q="", location="   ", job_type="")
    assert criteria.q is None
    assert criteria.location is None
    assert criteria.job_type is None
    assert criteria.is_empty()


def test_like_pattern_escapes_wildcards():
    assert like_pattern("50%_off") == "%50\\%\\_off%"
    assert like_pattern("a\\b") == "%a\\\\b%"


# ============================================================
# IN-MEMORY FILTERING
# ============================================================

@pytest.fixture
def catalogue():
    base = datetime(2025, 1, 10)
    return [
        make_job(title="Frontend Developer", company="TechCorp", location="Mumbai, Maharashtra",
                 job_type="full-time", description="React UI", created_at=base),
        make_job(title="Marketing Intern", company="BrandWorks", location="Delhi",
                 job_type="internship", description="Campaigns", created_at=base - timedelta(days=1)),
        make_job(title="React Native Dev", company="AppHouse", location="mumbai",
                 job_type="contract", description="Mobile apps", created_at=base - timedelta(days=2)),
        make_job(title="Closed Role", company="Gone", location="Mumbai",
                 description="React", is_active=False, created_at=base + timedelta(days=1)),
    ]


def test_empty_criteria_returns_all_active_newest_first(catalogue):
    result = apply_criteria(JOB_SEARCH, catalogue)
    assert titles(result) == ["Frontend Developer", "Marketing Intern", "React Native Dev"]


def test_free_text_matches_any_text_field_case_insensitively(catalogue):
    # "react" is in one title and one description
    result = apply_criteria(JOB_SEARCH, catalogue, {"q": "REACT"})
    assert titles(result) == ["Frontend Developer", "React Native Dev"]

    result = apply_criteria(JOB_SEARCH, catalogue, {"q": "brandworks"})
    assert titles(result) == ["Marketing Intern"]


def test_location_is_case_insensitive_substring(catalogue):
    result = apply_criteria(JOB_SEARCH, catalogue, {"location": "MUMBAI"})
    assert titles(result) == ["Frontend Developer", "React Native Dev"]


def test_exact_filters_must_be_equal(catalogue):
    result = apply_criteria(JOB_SEARCH, catalogue, JobSearchCriteria(job_type=JobType.INTERNSHIP))
    assert titles(result) == ["Marketing Intern"]

    result = apply_criteria(JOB_SEARCH, catalogue, {"job_type": "intern"})
    assert result == []


def test_criteria_are_anded_together(catalogue):
    result = apply_criteria(JOB_SEARCH, catalogue, {"q": "react", "location": "mumbai", "job_type": "contract"})
    assert titles(result) == ["React Native Dev"]


def test_adding_a_criterion_never_grows_the_result(catalogue):
    broad = apply_criteria(JOB_SEARCH, catalogue, {"location": "mumbai"})
    narrow = apply_criteria(JOB_SEARCH, catalogue, {"location": "mumbai", "job_type": "full-time"})
    assert set(map(id, narrow)) <= set(map(id, broad))


def test_whitespace_only_criteria_do_not_filter(catalogue):
    assert apply_criteria(JOB_SEARCH, catalogue, {"q": "   ", "location": " "}) == apply_criteria(JOB_SEARCH, catalogue)


def test_inactive_records_never_match(catalogue):
    assert not matches(JOB_SEARCH, catalogue[3], {"q": "react"})


def test_records_without_active_flag_count_as_active():
    record = {"title": "Pin", "company": "X", "description": "", "location": "Pune",
              "job_type": "full-time", "created_at": datetime(2025, 1, 1)}
    assert matches(JOB_SEARCH, record, {"location": "pune"})


def test_equal_timestamps_keep_incoming_order():
    same = datetime(2025, 1, 1)
    records = [make_job(title=f"Job {i}", created_at=same) for i in range(3)]
    assert titles(apply_criteria(JOB_SEARCH, records)) == ["Job 0", "Job 1", "Job 2"]


def test_keywords_match_if_any_keyword_matches(catalogue):
    result = apply_criteria(JOB_SEARCH, catalogue, keywords=["campaigns", "mobile"])
    assert titles(result) == ["Marketing Intern", "React Native Dev"]


def test_limit_applies_after_ordering(catalogue):
    assert titles(apply_criteria(JOB_SEARCH, catalogue, limit=1)) == ["Frontend Developer"]


def test_guide_search_has_no_active_filter():
    guide = {"title": "Data Science", "category": "Analytics", "content": "Python", "created_at": None}
    assert matches(GUIDE_SEARCH, guide, GuideSearchCriteria(category="Analytics"))
    assert not matches(GUIDE_SEARCH, guide, GuideSearchCriteria(category="Finance"))


# ============================================================
# SQL RENDERING
# ============================================================

def test_statement_has_no_where_clause_for_guides_without_criteria():
    sql = str(build_statement(GUIDE_SEARCH))
    assert "WHERE" not in sql
    assert "ORDER BY career_guidance.created_at DESC" in sql


def test_statement_always_filters_active_jobs_and_orders():
    sql = str(build_statement(JOB_SEARCH, limit=6))
    assert "jobs.is_active IS" in sql
    assert "ORDER BY jobs.created_at DESC" in sql
    assert "LIMIT" in sql


@pytest.mark.asyncio
async def test_sql_search_returns_active_jobs_newest_first(db: AsyncSession, jobs):
    result = await run_search(db, JOB_SEARCH)
    assert titles(result) == ["Data Analyst", "Marketing Intern", "Frontend Developer", "Backend Developer"]


@pytest.mark.asyncio
async def test_sql_search_free_text_and_location(db: AsyncSession, jobs):
    result = await run_search(db, JOB_SEARCH, {"q": "REACT"})
    assert titles(result) == ["Frontend Developer"]

    result = await run_search(db, JOB_SEARCH, {"location": "maharashtra"})
    assert titles(result) == ["Data Analyst", "Frontend Developer"]


@pytest.mark.asyncio
async def test_sql_and_memory_agree(db: AsyncSession, jobs):
    scenarios = [
        {},
        {"q": "developer"},
        {"location": "MAHARASHTRA", "job_type": "full-time"},
        {"experience_level": "entry"},
        {"q": "python", "job_type": "internship"},
        {"q": "  "},
    ]
    for criteria in scenarios:
        in_sql = await run_search(db, JOB_SEARCH, criteria)
        in_memory = apply_criteria(JOB_SEARCH, jobs, criteria)
        assert titles(in_sql) == titles(in_memory), criteria


@pytest.mark.asyncio
async def test_sql_search_treats_wildcards_literally(db: AsyncSession, jobs):
    db.add(make_job(title="100% Remote Tester", created_at=datetime(2024, 12, 1)))
    await db.commit()

    result = await run_search(db, JOB_SEARCH, {"q": "100%"})
    assert titles(result) == ["100% Remote Tester"]

    # "_" must not act as a single-character wildcard
    assert await run_search(db, JOB_SEARCH, {"q": "Data_Analyst"}) == []


@pytest.mark.asyncio
async def test_run_search_reports_backend_failure():
    class BrokenSession:
        async def execute(self, query):
            from sqlalchemy.exc import OperationalError
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(BackendUnavailableError):
        await run_search(BrokenSession(), JOB_SEARCH)


# ============================================================
# REFERENCE SCENARIOS
# ============================================================

@pytest.fixture
def pune_mumbai():
    return [
        make_job(title="Backend Developer", job_type="full-time", location="Pune", created_at=datetime(2025, 1, 3)),
        make_job(title="Intern QA", job_type="internship", location="Pune", created_at=datetime(2025, 1, 1)),
        make_job(title="Backend Lead", job_type="full-time", location="Mumbai", created_at=datetime(2025, 1, 2)),
    ]


def test_scenario_full_time_filter(pune_mumbai):
    result = apply_criteria(JOB_SEARCH, pune_mumbai, {"job_type": "full-time"})
    assert titles(result) == ["Backend Developer", "Backend Lead"]


def test_scenario_location_filter(pune_mumbai):
    result = apply_criteria(JOB_SEARCH, pune_mumbai, {"location": "pune"})
    assert titles(result) == ["Backend Developer", "Intern QA"]


def test_clearing_criteria_restores_full_ordered_set(pune_mumbai):
    apply_criteria(JOB_SEARCH, pune_mumbai, {"location": "pune", "q": "intern"})
    assert titles(apply_criteria(JOB_SEARCH, pune_mumbai, {})) == ["Backend Developer", "Backend Lead", "Intern QA"]


def test_results_are_ordered_by_recency(pune_mumbai):
    result = apply_criteria(JOB_SEARCH, pune_mumbai, {"q": "backend"})
    assert all(a.created_at >= b.created_at for a, b in zip(result, result[1:]))


def test_substring_match_ignores_case():
    job = make_job(title="Software Engineer")
    assert matches(JOB_SEARCH, job, {"q": "engineer"})
