"""
FastAPI dependency injection.

Central place for all shared dependencies used across routes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exclude_categories.core.store import InMemorySettingsStore
from exclude_categories.db.session import get_db_session
from exclude_categories.plugin import ExcludeCategoriesPlugin
from exclude_categories.services.option_service import OptionService


def get_plugin(request: Request) -> ExcludeCategoriesPlugin:
    """The plugin instance constructed by the app factory."""
    return request.app.state.plugin


def get_options_cache(request: Request) -> InMemorySettingsStore:
    return request.app.state.options_cache


async def get_option_service(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> OptionService:
    return OptionService(db, request.app.state.plugin.registry)


# Type aliases for cleaner signatures
DBSession = Annotated[AsyncSession, Depends(get_db_session)]
Plugin = Annotated[ExcludeCategoriesPlugin, Depends(get_plugin)]
OptionsCache = Annotated[InMemorySettingsStore, Depends(get_options_cache)]
Options = Annotated[OptionService, Depends(get_option_service)]
