"""SQLAlchemy database session and engine configuration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from data_design.config import get_settings
from data_design.domain.exceptions import StorageError
from data_design.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+aiomysql://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for ``url``; SQLite connections enforce foreign keys."""
    async_url = _get_async_url(url)
    engine = create_async_engine(async_url, future=True, **kwargs)
    if async_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


settings = get_settings()

engine = build_engine(
    settings.database_url,
    echo=settings.database_echo,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """Yield a session whose work is one transaction: commit on success, roll back on error."""
    async with (factory or async_session_factory)() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as exc:
            await session.rollback()
            logger.error("Transaction rolled back: %s", exc)
            raise StorageError("transaction failed", exc) from exc
        except Exception:
            await session.rollback()
            raise


async def create_schema(target: AsyncEngine | None = None) -> None:
    """Create the profile, article and clap tables when they do not exist."""
    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(target: AsyncEngine | None = None) -> None:
    """Drop the profile, article and clap tables."""
    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
