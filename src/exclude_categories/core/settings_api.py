"""
Settings registration and admin field descriptions.

Settings are registered into an option group with a sanitize callback that
runs before any value is persisted. Sections and fields describe how the
admin surface presents them; rendering is left to the client.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable

SanitizeCallback = Callable[[Any], str]

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+", re.IGNORECASE)


def sanitize_html_id(name: str) -> str:
    """Replace runs of non-alphanumerics with a hyphen."""
    return _NON_ALNUM_RUN.sub("-", name)


@dataclass(frozen=True)
class RegisteredSetting:
    group: str
    name: str
    sanitize_callback: SanitizeCallback | None = None


@dataclass(frozen=True)
class SettingsSection:
    id: str
    title: str
    page: str


@dataclass
class SettingsField:
    id: str
    title: str
    page: str
    section: str
    setting: str
    label_for: str
    description: str = ""
    input_attributes: dict[str, str] = field(default_factory=dict)


class SettingsRegistry:
    def __init__(self) -> None:
        self._settings: dict[str, RegisteredSetting] = {}
        self._sections: dict[str, list[SettingsSection]] = defaultdict(list)
        self._fields: dict[str, list[SettingsField]] = defaultdict(list)

    def register_setting(
        self, group: str, name: str, sanitize_callback: SanitizeCallback | None = None
    ) -> None:
        self._settings[name] = RegisteredSetting(group, name, sanitize_callback)

    def is_registered(self, name: str) -> bool:
        return name in self._settings

    def registered(self, group: str) -> list[RegisteredSetting]:
        return [s for s in self._settings.values() if s.group == group]

    def sanitize_option(self, name: str, value: Any) -> str:
        setting = self._settings.get(name)
        if setting is None or setting.sanitize_callback is None:
            return "" if value is None else str(value)
        return setting.sanitize_callback(value)

    def add_settings_section(self, section_id: str, title: str, page: str) -> None:
        sections = self._sections[page]
        sections[:] = [s for s in sections if s.id != section_id]
        sections.append(SettingsSection(section_id, title, page))

    def add_settings_field(self, settings_field: SettingsField) -> None:
        fields = self._fields[settings_field.page]
        fields[:] = [f for f in fields if f.id != settings_field.id]
        fields.append(settings_field)

    def sections(self, page: str) -> list[SettingsSection]:
        return list(self._sections.get(page, []))

    def fields(self, page: str, section: str | None = None) -> list[SettingsField]:
        return [
            f for f in self._fields.get(page, [])
            if section is None or f.section == section
        ]
