"""Database fixtures: every test gets a fresh in-memory SQLite schema."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from data_design.infrastructure.database import build_engine, create_schema


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
