"""Tests for settings registration and field descriptions."""

from __future__ import annotations

import pytest

from exclude_categories.core.settings_api import (
    SettingsField,
    SettingsRegistry,
    sanitize_html_id,
)


@pytest.mark.unit
class TestSanitizeHtmlId:
    def test_replaces_runs(self) -> None:
        assert sanitize_html_id("ts_exclude_categories_blog") == "ts-exclude-categories-blog"
        assert sanitize_html_id("a__ b!c") == "a-b-c"

    def test_keeps_case(self) -> None:
        assert sanitize_html_id("Blog_Page") == "Blog-Page"


@pytest.mark.unit
class TestSettingsRegistry:
    def test_sanitize_option_uses_callback(self) -> None:
        registry = SettingsRegistry()
        registry.register_setting("reading", "upper", lambda v: str(v).upper())
        assert registry.sanitize_option("upper", "abc") == "ABC"

    def test_unregistered_option_is_stringified(self) -> None:
        registry = SettingsRegistry()
        assert registry.sanitize_option("other", 12) == "12"
        assert registry.sanitize_option("other", None) == ""

    def test_registered_by_group(self) -> None:
        registry = SettingsRegistry()
        registry.register_setting("reading", "a")
        registry.register_setting("general", "b")
        assert [s.name for s in registry.registered("reading")] == ["a"]
        assert registry.is_registered("b")

    def test_re_adding_field_replaces_it(self) -> None:
        registry = SettingsRegistry()
        for title in ("Old", "New"):
            registry.add_settings_field(
                SettingsField(
                    id="f", title=title, page="reading", section="s",
                    setting="opt", label_for="opt",
                )
            )
        assert [f.title for f in registry.fields("reading")] == ["New"]

    def test_fields_filtered_by_section(self) -> None:
        registry = SettingsRegistry()
        for field_id, section in (("a", "one"), ("b", "two")):
            registry.add_settings_field(
                SettingsField(
                    id=field_id, title=field_id, page="reading", section=section,
                    setting=field_id, label_for=field_id,
                )
            )
        assert [f.id for f in registry.fields("reading", "two")] == ["b"]
        assert registry.fields("general") == []

    def test_sections(self) -> None:
        registry = SettingsRegistry()
        registry.add_settings_section("s", "Section", "reading")
        registry.add_settings_section("s", "Section renamed", "reading")
        assert [s.title for s in registry.sections("reading")] == ["Section renamed"]
