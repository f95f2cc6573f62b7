"""Tests for the exclusion resolver."""

from __future__ import annotations

from typing import Any

import pytest

from exclude_categories.core.ids import MAX_ID
from exclude_categories.core.query import CATEGORY_NOT_IN, ContentQuery
from exclude_categories.core.resolver import (
    OPTION_NAMES,
    ExclusionSetting,
    exclude_categories,
    get_excluded_categories,
    select_setting,
)
from exclude_categories.core.store import InMemorySettingsStore


def _query(kind: str = "home", existing: Any = None, **flags: bool) -> ContentQuery:
    """A main, front-end query of the given kind: home, feed, search or other."""
    query = ContentQuery(
        home=kind in ("home", "feed"),
        feed=kind == "feed",
        search=kind == "search",
    )
    for name, value in flags.items():
        setattr(query, name, value)
    if existing is not None:
        query.set(CATEGORY_NOT_IN, existing)
    return query


def _store(**values: str) -> InMemorySettingsStore:
    return InMemorySettingsStore(
        {ExclusionSetting(name).option_name: value for name, value in values.items()}
    )


ALL_SET = {"blog": "1,2", "search": "3,4", "feed": "5,6"}


@pytest.mark.unit
class TestOptionNames:
    def test_fixed_option_names(self) -> None:
        assert OPTION_NAMES == (
            "ts_exclude_categories_blog",
            "ts_exclude_categories_search",
            "ts_exclude_categories_feed",
        )


@pytest.mark.unit
class TestSelectSetting:
    def test_home_uses_blog(self) -> None:
        assert select_setting(_query("home")) is ExclusionSetting.BLOG

    def test_home_feed_uses_feed(self) -> None:
        assert select_setting(_query("feed")) is ExclusionSetting.FEED

    def test_search_uses_search(self) -> None:
        assert select_setting(_query("search")) is ExclusionSetting.SEARCH

    def test_other_listing_uses_nothing(self) -> None:
        assert select_setting(_query("other")) is None

    def test_secondary_query_uses_nothing(self) -> None:
        assert select_setting(_query("home", main_query=False)) is None

    def test_admin_query_uses_nothing(self) -> None:
        assert select_setting(_query("search", admin=True)) is None

    def test_home_wins_over_search(self) -> None:
        assert select_setting(_query("home", search=True)) is ExclusionSetting.BLOG


@pytest.mark.unit
class TestGetExcludedCategories:
    def test_unset_is_empty(self) -> None:
        assert get_excluded_categories(InMemorySettingsStore(), ExclusionSetting.BLOG) == []

    def test_stored_values_are_sanitized_again(self) -> None:
        store = _store(blog=" 3, x,3,0, 5")
        assert get_excluded_categories(store, ExclusionSetting.BLOG) == [3, 5]

    def test_garbage_degrades_to_empty(self) -> None:
        store = _store(feed="not a list")
        assert get_excluded_categories(store, ExclusionSetting.FEED) == []

    def test_oversized_stored_id_saturates(self) -> None:
        store = _store(blog="9" * 5000 + ",3")
        assert get_excluded_categories(store, ExclusionSetting.BLOG) == [MAX_ID, 3]


@pytest.mark.unit
class TestExcludeCategories:
    def test_blog_merges_with_existing(self) -> None:
        query = _query("home", existing=[5, 9])
        exclude_categories(query, _store(blog="3,5"))
        assert sorted(query.get(CATEGORY_NOT_IN)) == [3, 5, 9]

    def test_oversized_stored_value_still_applies(self) -> None:
        query = _query("home", existing=[5])
        exclude_categories(query, _store(blog="9" * 5000 + ",3"))
        assert query.get(CATEGORY_NOT_IN) == [5, MAX_ID, 3]

    def test_feed_uses_feed_not_blog(self) -> None:
        query = _query("feed")
        exclude_categories(query, _store(**ALL_SET))
        assert query.get(CATEGORY_NOT_IN) == [5, 6]

    def test_search(self) -> None:
        query = _query("search", existing=[7])
        exclude_categories(query, _store(**ALL_SET))
        assert query.get(CATEGORY_NOT_IN) == [7, 3, 4]

    @pytest.mark.parametrize("store", [_store(search=""), InMemorySettingsStore()])
    def test_empty_search_setting_leaves_field_untouched(self, store: InMemorySettingsStore) -> None:
        existing = [8]
        query = _query("search", existing=existing)
        exclude_categories(query, store)
        assert query.get(CATEGORY_NOT_IN) is existing

    def test_empty_setting_does_not_create_field(self) -> None:
        query = _query("home")
        exclude_categories(query, _store(blog="0,,"))
        assert CATEGORY_NOT_IN not in query.query_vars

    @pytest.mark.parametrize("kind", ["home", "feed", "search", "other"])
    def test_secondary_query_never_mutated(self, kind: str) -> None:
        query = _query(kind, existing=[1], main_query=False)
        exclude_categories(query, _store(**ALL_SET))
        assert query.query_vars == {CATEGORY_NOT_IN: [1]}

    @pytest.mark.parametrize("kind", ["home", "feed", "search", "other"])
    def test_admin_query_never_mutated(self, kind: str) -> None:
        query = _query(kind, admin=True)
        exclude_categories(query, _store(**ALL_SET))
        assert query.query_vars == {}

    def test_other_listing_not_mutated(self) -> None:
        query = _query("other")
        exclude_categories(query, _store(**ALL_SET))
        assert query.query_vars == {}

    @pytest.mark.parametrize("existing", ["5", 5, {"x": 1}])
    def test_non_list_existing_field_reads_as_empty(self, existing: Any) -> None:
        query = _query("home", existing=existing)
        exclude_categories(query, _store(blog="3"))
        assert query.get(CATEGORY_NOT_IN) == [3]

    def test_existing_string_ids_are_kept(self) -> None:
        query = _query("home", existing=["9", 0])
        exclude_categories(query, _store(blog="3,9"))
        assert query.get(CATEGORY_NOT_IN) == [9, 3]

    @pytest.mark.parametrize("kind", ["home", "feed", "search"])
    def test_idempotent(self, kind: str) -> None:
        store = _store(**ALL_SET)
        once = _query(kind, existing=[5, 9])
        exclude_categories(once, store)

        twice = _query(kind, existing=[5, 9])
        exclude_categories(twice, store)
        exclude_categories(twice, store)

        assert twice.get(CATEGORY_NOT_IN) == once.get(CATEGORY_NOT_IN)
