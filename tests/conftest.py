"""
Shared test fixtures.

Uses an in-memory SQLite database shared across connections.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from exclude_categories.app import create_app
from exclude_categories.config import Settings, get_settings
from exclude_categories.core.hooks import HookRegistry
from exclude_categories.core.settings_api import SettingsRegistry
from exclude_categories.core.store import InMemorySettingsStore
from exclude_categories.db.session import get_db_session
from exclude_categories.models.base import Base
from exclude_categories.plugin import ExcludeCategoriesPlugin

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Test Settings

@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    """Point get_settings() at test values for everything built inside the test."""
    monkeypatch.setenv("EXCAT_ENV", "test")
    monkeypatch.setenv("EXCAT_DATABASE__URL", TEST_DATABASE_URL)
    monkeypatch.setenv("EXCAT_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("EXCAT_LOGGING__FORMAT", "console")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


# Plugin Fixtures

@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def registry() -> SettingsRegistry:
    return SettingsRegistry()


@pytest.fixture
def plugin(
    store: InMemorySettingsStore, hooks: HookRegistry, registry: SettingsRegistry
) -> ExcludeCategoriesPlugin:
    instance = ExcludeCategoriesPlugin(store, hooks, registry)
    hooks.do_action("init")
    hooks.do_action("admin_menu")
    return instance


# Database Fixtures

@pytest.fixture
async def test_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# App + Client Fixtures

@pytest.fixture
async def app(test_engine: AsyncEngine, test_settings: Settings) -> FastAPI:
    application = create_app()
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
