"""Shared test fixtures for async database sessions and seeded source data."""

from collections.abc import AsyncGenerator, Awaitable, Callable, Iterable

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from voter_outreach.core.config import Settings
from voter_outreach.models import Candidate, PrecinctDistrict, Voter
from voter_outreach.models.base import Base

SeedFn = Callable[..., Awaitable[None]]


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        cost_per_recipient=0.05,
    )


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(async_session: AsyncSession) -> SeedFn:
    """Return a helper that loads source rows the way the bulk import would.

    Accepts ``candidates`` as dicts of Candidate columns, ``districts`` as
    ``(precinct, district)`` pairs and ``voters`` as dicts of Voter columns.
    """

    async def _seed(
        *,
        candidates: Iterable[dict] = (),
        districts: Iterable[tuple[str, str]] = (),
        voters: Iterable[dict] = (),
    ) -> None:
        for candidate in candidates:
            values = {"unopposed": False, "triggers_precinct": True, "display_weight": 0.0, **candidate}
            async_session.add(Candidate(**values))
        for precinct, district in districts:
            async_session.add(PrecinctDistrict(precinct=precinct, district=district))
        for voter in voters:
            async_session.add(Voter(**voter))
        await async_session.commit()

    return _seed
