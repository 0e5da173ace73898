"""
Pytest fixtures for testing.
"""
import shutil
import tempfile
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Import database module BEFORE app to allow override
import youthconnect.database
from youthconnect.config import settings
from youthconnect.database import Base
# Import ALL models so Base.metadata knows about all tables
from youthconnect.models import CareerGuide, Job, JobAlert, JobApplication, User
from youthconnect.services.security import create_session_token, hash_password

# Now import app (after we can override database)
from youthconnect.main import app as fastapi_app


# Test database URL (use in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Override resume directory for tests
TEST_RESUME_DIR = Path(tempfile.gettempdir()) / "youthconnect_test_resumes"
settings.resume_dir = TEST_RESUME_DIR
settings.storage_backend = "local"

TEST_PASSWORD = "secret123"

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << >>\n%%EOF\n"
PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture(scope="session", autouse=True)
def cleanup_test_resumes():
    """Clean up test resume directory before and after test session."""
    if TEST_RESUME_DIR.exists():
        shutil.rmtree(TEST_RESUME_DIR)
    TEST_RESUME_DIR.mkdir(parents=True, exist_ok=True)

    yield

    if TEST_RESUME_DIR.exists():
        shutil.rmtree(TEST_RESUME_DIR)


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.

    StaticPool keeps one connection alive so every session sees the same
    in-memory database.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Replace the app's engine and sessionmaker so get_db() uses the test DB
    original_engine = youthconnect.database.engine
    original_sessionmaker = youthconnect.database.AsyncSessionLocal

    youthconnect.database.engine = test_engine
    youthconnect.database.AsyncSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    session = async_session()

    try:
        yield session
    finally:
        await session.close()
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await test_engine.dispose()

        youthconnect.database.engine = original_engine
        youthconnect.database.AsyncSessionLocal = original_sessionmaker


@pytest_asyncio.fixture
async def async_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing endpoints.

    The db fixture already replaced the engine, so all endpoints use the
    test database.
    """
    transport = ASGITransport(app=fastapi_app)

    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True  # Follow 307 redirects for trailing slashes
    ) as client:
        yield client


@pytest_asyncio.fixture
async def test_user(db: AsyncSession) -> User:
    """A confirmed user with a known password."""
    user = User(
        email="testuser@example.com",
        password_hash=hash_password(TEST_PASSWORD, method="pbkdf2:sha256:1000"),
        first_name="Test",
        last_name="User",
        email_verified_at=datetime.utcnow()
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def client(async_client: AsyncClient, test_user: User) -> AsyncClient:
    """Authenticated client with the signed httpOnly session cookie."""
    async_client.cookies.set("auth_token", create_session_token(str(test_user.id)))
    return async_client


def make_job(**overrides) -> Job:
    values = dict(
        title="Frontend Developer",
        company="TechCorp Solutions",
        location="Mumbai, Maharashtra",
        salary_range="₹4-6 LPA",
        job_type="full-time",
        experience_level="entry",
        description="Build responsive web interfaces with React.",
        requirements=["React", "JavaScript"],
        benefits=["Health insurance"],
        is_active=True,
        created_at=datetime(2025, 1, 1, 12, 0, 0),
        updated_at=datetime(2025, 1, 1, 12, 0, 0),
    )
    values.update(overrides)
    return Job(**values)


@pytest_asyncio.fixture
async def jobs(db: AsyncSession) -> list[Job]:
    """
    A small catalogue of jobs, newest first in the order listed below:
    data analyst, marketing intern, frontend dev, backend dev (Bangalore),
    and an inactive React role that must never be returned.
    """
    base = datetime(2025, 1, 10, 9, 0, 0)
    rows = [
        make_job(
            title="Data Analyst",
            company="Insight Labs",
            location="Pune, Maharashtra",
            job_type="full-time",
            experience_level="mid",
            description="SQL and dashboards for product teams.",
            latitude=18.52,
            longitude=73.85,
            application_deadline=date(2025, 8, 15),
            created_at=base,
        ),
        make_job(
            title="Marketing Intern",
            company="BrandWorks",
            location="Delhi",
            job_type="internship",
            experience_level="entry",
            description="Social media campaigns.",
            created_at=base - timedelta(days=1),
        ),
        make_job(
            title="Frontend Developer",
            company="TechCorp Solutions",
            location="Mumbai, Maharashtra",
            job_type="full-time",
            experience_level="entry",
            description="Build responsive web interfaces with React.",
            latitude=19.07,
            longitude=72.87,
            created_at=base - timedelta(days=2),
        ),
        make_job(
            title="Backend Developer",
            company="CloudNine",
            location="Bangalore, Karnataka",
            job_type="contract",
            experience_level="senior",
            description="Python services and APIs.",
            created_at=base - timedelta(days=3),
        ),
        make_job(
            title="React Engineer",
            company="Gone Inc",
            location="Mumbai",
            description="Closed React role.",
            is_active=False,
            created_at=base + timedelta(days=1),
        ),
    ]
    db.add_all(rows)
    await db.commit()
    for row in rows:
        await db.refresh(row)
    return rows


@pytest_asyncio.fixture
async def guides(db: AsyncSession) -> list[CareerGuide]:
    base = datetime(2025, 2, 1, 9, 0, 0)
    rows = [
        CareerGuide(
            title="Becoming a Data Scientist",
            category="Analytics",
            content="Statistics, Python and machine learning fundamentals.",
            skills_required=["Python", "Statistics"],
            salary_info="₹6-20 LPA",
            created_at=base,
        ),
        CareerGuide(
            title="Software Developer Path",
            category="Technology",
            content="Learn programming, data structures and system design.",
            skills_required=["Programming"],
            created_at=base - timedelta(days=1),
        ),
        CareerGuide(
            title="Digital Marketing Basics",
            category="Marketing",
            content="SEO, content and paid campaigns.",
            created_at=base - timedelta(days=2),
        ),
    ]
    db.add_all(rows)
    await db.commit()
    for row in rows:
        await db.refresh(row)
    return rows
