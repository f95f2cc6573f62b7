"""
Exclude Categories plugin object.

Constructed once at startup. The constructor subscribes the three handlers
to the host's hooks:

  init           → register_settings
  admin_menu     → add_settings_ui
  pre_get_posts  → exclude_categories
"""

from __future__ import annotations

import dataclasses
from typing import Any

import structlog

from exclude_categories.core import resolver
from exclude_categories.core.hooks import HookRegistry
from exclude_categories.core.query import ClassifiedRequest
from exclude_categories.core.resolver import OPTION_NAMES, ExclusionSetting
from exclude_categories.core.sanitizer import sanitize_setting
from exclude_categories.core.settings_api import (
    SettingsField,
    SettingsRegistry,
    sanitize_html_id,
)
from exclude_categories.core.store import SettingsStore

logger = structlog.stdlib.get_logger()

OPTION_GROUP = "reading"
SETTINGS_PAGE = "reading"
SECTION_ID = "ts-exclude-categories"
SECTION_TITLE = "Exclude categories"

FIELD_TITLES: dict[ExclusionSetting, tuple[str, str]] = {
    ExclusionSetting.BLOG: (
        "Blog page",
        "Enter comma separated IDs of categories to exclude from blog page.",
    ),
    ExclusionSetting.SEARCH: (
        "Search results page",
        "Enter comma separated IDs of categories to exclude from search results page.",
    ),
    ExclusionSetting.FEED: (
        "Feed",
        "Enter comma separated IDs of categories to exclude from feed.",
    ),
}


class ExcludeCategoriesPlugin:
    def __init__(
        self,
        store: SettingsStore,
        hooks: HookRegistry,
        registry: SettingsRegistry,
    ) -> None:
        self.store = store
        self.hooks = hooks
        self.registry = registry

        hooks.add_action("init", self.register_settings)
        hooks.add_action("admin_menu", self.add_settings_ui)
        hooks.add_action("pre_get_posts", self.exclude_categories)

    def register_settings(self) -> None:
        for option_name in OPTION_NAMES:
            self.registry.register_setting(OPTION_GROUP, option_name, sanitize_setting)

    def add_settings_ui(self) -> None:
        self.registry.add_settings_section(SECTION_ID, SECTION_TITLE, SETTINGS_PAGE)
        for setting in ExclusionSetting:
            title, description = FIELD_TITLES[setting]
            html_id = sanitize_html_id(setting.option_name)
            self.registry.add_settings_field(
                SettingsField(
                    id=f"techspokes-exclude-categories-{setting.value}",
                    title=title,
                    page=SETTINGS_PAGE,
                    section=SECTION_ID,
                    setting=setting.option_name,
                    label_for=html_id,
                    description=description,
                    input_attributes={
                        "id": html_id,
                        "name": setting.option_name,
                        "type": "text",
                        "class": "widefat",
                    },
                )
            )

    def settings_field_values(self) -> list[SettingsField]:
        """Registered fields with their current stored value filled in."""
        fields = []
        for settings_field in self.registry.fields(SETTINGS_PAGE, SECTION_ID):
            attributes = {
                **settings_field.input_attributes,
                "value": self.store.get(settings_field.setting, ""),
            }
            fields.append(dataclasses.replace(settings_field, input_attributes=attributes))
        return fields

    def update_setting(self, setting: ExclusionSetting, value: Any) -> str:
        canonical = sanitize_setting(value)
        self.store.set(setting.option_name, canonical)
        logger.info("exclusions.updated", setting=setting.value, value=canonical)
        return canonical

    def exclude_categories(self, query: ClassifiedRequest) -> None:
        resolver.exclude_categories(query, self.store)
