"""
Hotel Listing Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── db_engine: in-memory SQLite engine, schema created, reference rows seeded
    ├── db_session: AsyncSession on db_engine for repository tests
    ├── test_client: HTTPX AsyncClient wired to db_engine
    ├── admin_headers / user_headers: bearer tokens carrying one role each
    └── sample_hotel_data / sample_country_data: valid request bodies
"""

import os

# Override settings for testing BEFORE any hotel_listing imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hotel_listing.database import Base, get_db_session
from hotel_listing.models import DEFAULT_ROLES, Country, Hotel, Role, ROLE_ADMINISTRATOR, ROLE_USER
from hotel_listing.security.auth import create_access_token

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def seed_rows():
    """Reference data matching the first migration plus the role seed."""
    countries = [
        Country(id=1, name="Jamaica", short_code="JM"),
        Country(id=2, name="Bahamas", short_code="BS"),
        Country(id=3, name="Cayman Island", short_code="CI"),
    ]
    hotels = [
        Hotel(id=1, name="Sandals Resort and Spa", address="Negril", rating=4.5, country_id=1),
        Hotel(id=2, name="Comfort Suites", address="George Town", rating=4.3, country_id=3),
        Hotel(id=3, name="Grand Palldium", address="Nassua", rating=4.0, country_id=2),
    ]
    roles = [
        Role(id=role_id, name=name, normalized_name=name.upper(), concurrency_stamp=stamp)
        for role_id, name, stamp in DEFAULT_ROLES
    ]
    return countries, hotels, roles


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Provides a seeded in-memory database.

    StaticPool keeps the single SQLite connection alive so every session
    sees the same database; foreign keys are switched on per connection so
    ON DELETE CASCADE behaves as it does on PostgreSQL.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    countries, hotels, roles = seed_rows()
    async with factory() as session:
        session.add_all(countries)
        await session.flush()
        session.add_all(hotels)
        session.add_all(roles)
        await session.commit()

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            uow = UnitOfWork(mock_db_session)
            uow._hotels = MagicMock(get_all=AsyncMock(return_value=[]))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   ASGITransport routes requests straight to the app; the session
           dependency is overridden to hand out sessions on the seeded
           in-memory database, one per request as in production.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from hotel_listing.main import app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(
        user_id="b5f1c3e2-0000-4000-8000-000000000001",
        email="admin@hotellisting.com",
        roles=[ROLE_ADMINISTRATOR],
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(
        user_id="b5f1c3e2-0000-4000-8000-000000000002",
        email="guest@hotellisting.com",
        roles=[ROLE_USER],
    )
    return {"Authorization": f"Bearer {token}"}


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_hotel_data():
    return {"name": "Grand", "address": "X", "rating": 4, "countryId": 1}


@pytest.fixture
def sample_country_data():
    return {"name": "Barbados", "shortCode": "BB", "longCode": "BRB"}
