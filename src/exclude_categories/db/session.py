"""Async database session management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from exclude_categories.config import DatabaseSettings, get_settings
from exclude_categories.models.base import Base


def build_engine(database: DatabaseSettings) -> AsyncEngine:
    options: dict[str, Any] = {"echo": database.echo, "pool_pre_ping": True}
    # SQLite pools do not take sizing options
    if not database.is_sqlite:
        options.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_recycle=300,
        )
    return create_async_engine(database.url, **options)


engine: AsyncEngine = build_engine(get_settings().database)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_tables(bind: AsyncEngine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — yields an async DB session."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
