"""
Exclusion resolver.

Picks the exclusion setting that applies to a content listing and merges
its category IDs into the query's ``category__not_in`` field.

Decision (first match wins):
  not main query / admin  → nothing
  home + feed             → feed
  home                    → blog
  search                  → search
  anything else           → nothing
"""

from __future__ import annotations

from enum import StrEnum

import structlog

from exclude_categories.core.ids import coerce_ids, merge_ids, parse_ids
from exclude_categories.core.query import CATEGORY_NOT_IN, ClassifiedRequest
from exclude_categories.core.sanitizer import sanitize_setting
from exclude_categories.core.store import SettingsStore

logger = structlog.stdlib.get_logger()


class ExclusionSetting(StrEnum):
    BLOG = "blog"
    SEARCH = "search"
    FEED = "feed"

    @property
    def option_name(self) -> str:
        return f"ts_exclude_categories_{self.value}"


OPTION_NAMES: tuple[str, ...] = tuple(s.option_name for s in ExclusionSetting)


def select_setting(request: ClassifiedRequest) -> ExclusionSetting | None:
    if not request.is_main_query() or request.is_admin():
        return None
    if request.is_home():
        return ExclusionSetting.FEED if request.is_feed() else ExclusionSetting.BLOG
    if request.is_search():
        return ExclusionSetting.SEARCH
    return None


def get_excluded_categories(settings: SettingsStore, setting: ExclusionSetting) -> list[int]:
    """Stored values are sanitized again in case they predate the sanitizer."""
    return parse_ids(sanitize_setting(settings.get(setting.option_name, "")))


def exclude_categories(request: ClassifiedRequest, settings: SettingsStore) -> None:
    """Add the applicable excluded categories to the request, never removing any."""
    setting = select_setting(request)
    if setting is None:
        return

    excluded = get_excluded_categories(settings, setting)
    if not excluded:
        return

    merged = merge_ids(coerce_ids(request.get(CATEGORY_NOT_IN, [])), excluded)
    request.set(CATEGORY_NOT_IN, merged)
    logger.debug("exclusions.applied", setting=setting.value, category_ids=merged)
