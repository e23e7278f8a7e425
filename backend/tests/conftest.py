"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that touches the database gets a fresh in-memory SQLite database
    - Settings never point at a real database during tests
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

from nestwell.db.base import Base  # noqa: E402
import nestwell.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
