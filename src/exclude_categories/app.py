"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exclude_categories import __version__
from exclude_categories.api.admin.router import admin_router
from exclude_categories.api.middleware.logging import RequestLoggingMiddleware
from exclude_categories.api.middleware.request_id import RequestIDMiddleware
from exclude_categories.api.v1.router import v1_router
from exclude_categories.common.errors import register_error_handlers
from exclude_categories.common.logging import configure_logging
from exclude_categories.config import get_settings
from exclude_categories.core.hooks import HookRegistry
from exclude_categories.core.settings_api import SettingsRegistry
from exclude_categories.core.store import InMemorySettingsStore
from exclude_categories.db.session import create_tables, engine
from exclude_categories.plugin import ExcludeCategoriesPlugin


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.logging.level, settings.logging.format)

    log = structlog.stdlib.get_logger()
    await log.ainfo(
        "exclude_categories.startup",
        version=__version__,
        env=settings.env,
        database=settings.database.url.split("@")[-1],
    )

    await create_tables(engine)

    yield

    await engine.dispose()
    await log.ainfo("exclude_categories.shutdown")


def create_app() -> FastAPI:
    """Application factory — called by Uvicorn."""
    settings = get_settings()

    app = FastAPI(
        title="Exclude Categories",
        description="Exclude categories from the blog index, search results and feed.",
        version=__version__,
        docs_url="/docs" if settings.env == "development" else None,
        redoc_url="/redoc" if settings.env == "development" else None,
        lifespan=lifespan,
    )

    # One plugin per process; its store is the options cache primed per request
    hooks = HookRegistry()
    options_cache = InMemorySettingsStore()
    plugin = ExcludeCategoriesPlugin(options_cache, hooks, SettingsRegistry())
    hooks.do_action("init")
    hooks.do_action("admin_menu")

    app.state.settings = settings
    app.state.hooks = hooks
    app.state.options_cache = options_cache
    app.state.plugin = plugin

    # Middleware (order matters; outermost first)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.env == "development" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(v1_router)
    app.include_router(admin_router)

    return app
