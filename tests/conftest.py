"""Shared test fixtures — async DB, client, factories.

Uses SQLite + aiosqlite for fast isolated tests without PostgreSQL.
"""

from __future__ import annotations

import os

# Configure before any import touches pydantic-settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_DEMO_DATA", "false")

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from peoplehub.client.api import ApiClient
from peoplehub.client.state import DashboardState
from peoplehub.client.store import ClientStore
from peoplehub.database import Base, get_db
from peoplehub.main import create_app

# Import ALL model modules so every table lands in Base.metadata
import peoplehub.common.audit  # noqa: F401
import peoplehub.employees.models  # noqa: F401
import peoplehub.records.models  # noqa: F401


# ── Test database (SQLite in-memory) ────────────────────────────────

TEST_DATABASE_URL = "sqlite+aiosqlite://"

engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionFactory = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False,
)


@pytest.fixture(autouse=True)
async def _setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter storage between tests to prevent cross-test interference."""
    from peoplehub.common.rate_limit import limiter
    limiter.reset()
    yield


async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app():
    """Create a fresh app instance with DB dependency overridden."""
    application = create_app()
    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ── Database session (for direct DB operations in tests) ────────────

@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        yield session
        await session.commit()


# ── Dashboard client pieces ─────────────────────────────────────────

@pytest.fixture
async def api(client) -> ApiClient:
    """ApiClient sharing the ASGI-wired httpx client."""
    return ApiClient(client=client)


@pytest.fixture
def store(tmp_path) -> ClientStore:
    return ClientStore(tmp_path / "state")


@pytest.fixture
def state(store) -> DashboardState:
    return DashboardState(store)


# ── Model factories ─────────────────────────────────────────────────

def _make_employee(
    *,
    id: str | None = None,
    first_name: str = "Dana",
    last_name: str = "Whitfield",
    email: str = "dana.whitfield@example.com",
    job_title: str = "Payroll Specialist",
    department: str = "Finance",
    location: str = "Chicago, IL",
    hire_date: str = "2021-04-12",
) -> dict:
    data = dict(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone="312-555-0100",
        job_title=job_title,
        department=department,
        location=location,
        hire_date=hire_date,
    )
    if id is not None:
        data["id"] = id
    return data


def _make_bonus(**overrides) -> dict:
    data = dict(
        type="Signing Bonus",
        amount="$5,000.00",
        frequency="One-time",
        eligibility_date="2024-01-15",
    )
    data.update(overrides)
    return data


def _make_note(**overrides) -> dict:
    data = dict(title="Check-in", content="Quarterly check-in went well.", created_by="HR")
    data.update(overrides)
    return data


async def _create_employee(client: AsyncClient, **kwargs) -> dict:
    """POST an employee through the API and return its JSON."""
    resp = await client.post("/api/employees", json=_make_employee(**kwargs))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
