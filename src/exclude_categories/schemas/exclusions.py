"""Exclusion settings schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExclusionSettingInfo(BaseModel):
    setting: str  # blog | search | feed
    option_name: str
    value: str
    category_ids: list[int]
    label: str
    description: str
    input_attributes: dict[str, str]


class ExclusionSettingsResponse(BaseModel):
    settings: list[ExclusionSettingInfo]


class UpdateExclusionsRequest(BaseModel):
    """Raw administrator input; every value is sanitized before it is stored."""

    model_config = ConfigDict(extra="forbid")

    blog: str | None = Field(None, max_length=10000)
    search: str | None = Field(None, max_length=10000)
    feed: str | None = Field(None, max_length=10000)


class UpdateExclusionRequest(BaseModel):
    value: str = Field("", max_length=10000)
