"""Database-backed option storage."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exclude_categories.core.settings_api import SettingsRegistry
from exclude_categories.core.store import InMemorySettingsStore
from exclude_categories.models.option import Option


class OptionService:
    """
    Reads and writes rows of the ``options`` table.

    Writes go through the settings registry so a registered sanitize
    callback always runs before a value is persisted.
    """

    def __init__(self, db: AsyncSession, registry: SettingsRegistry) -> None:
        self.db = db
        self.registry = registry

    async def _get_row(self, name: str) -> Option | None:
        result = await self.db.execute(select(Option).where(Option.option_name == name))
        return result.scalar_one_or_none()

    async def get_option(self, name: str, default: str = "") -> str:
        row = await self._get_row(name)
        return default if row is None else row.option_value

    async def update_option(self, name: str, value: Any) -> str:
        sanitized = self.registry.sanitize_option(name, value)
        row = await self._get_row(name)
        if row is None:
            self.db.add(Option(option_name=name, option_value=sanitized))
        else:
            row.option_value = sanitized
        await self.db.flush()
        return sanitized

    async def load_options(self, names: Iterable[str]) -> dict[str, str]:
        """Fetch several options with one query; unset names are absent."""
        result = await self.db.execute(
            select(Option.option_name, Option.option_value).where(
                Option.option_name.in_(list(names))
            )
        )
        return {name: value for name, value in result.all()}

    async def prime(self, store: InMemorySettingsStore, names: Iterable[str]) -> None:
        """Refresh cached options, dropping any that were deleted from the table."""
        names = list(names)
        values = await self.load_options(names)
        store.forget(n for n in names if n not in values)
        store.update(values)
