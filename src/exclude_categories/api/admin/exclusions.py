"""Exclusion settings management endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from exclude_categories.api.deps import Options, OptionsCache, Plugin
from exclude_categories.common.errors import NotFoundError
from exclude_categories.core.ids import parse_ids
from exclude_categories.core.resolver import OPTION_NAMES, ExclusionSetting
from exclude_categories.core.store import InMemorySettingsStore
from exclude_categories.plugin import ExcludeCategoriesPlugin
from exclude_categories.schemas.exclusions import (
    ExclusionSettingInfo,
    ExclusionSettingsResponse,
    UpdateExclusionRequest,
    UpdateExclusionsRequest,
)
from exclude_categories.services.option_service import OptionService

logger = structlog.stdlib.get_logger()

router = APIRouter()


async def _describe(
    plugin: ExcludeCategoriesPlugin, options: OptionService, cache: InMemorySettingsStore
) -> ExclusionSettingsResponse:
    await options.prime(cache, OPTION_NAMES)
    fields = {f.setting: f for f in plugin.settings_field_values()}
    settings = []
    for setting in ExclusionSetting:
        field = fields[setting.option_name]
        value = field.input_attributes.get("value", "")
        settings.append(
            ExclusionSettingInfo(
                setting=setting.value,
                option_name=setting.option_name,
                value=value,
                category_ids=parse_ids(value),
                label=field.title,
                description=field.description,
                input_attributes=field.input_attributes,
            )
        )
    return ExclusionSettingsResponse(settings=settings)


def _lookup(name: str) -> ExclusionSetting:
    try:
        return ExclusionSetting(name)
    except ValueError:
        raise NotFoundError(
            f"Unknown exclusion setting: {name}",
            details={"allowed": [s.value for s in ExclusionSetting]},
        ) from None


@router.get("", response_model=ExclusionSettingsResponse, summary="List exclusion settings")
async def list_exclusions(
    plugin: Plugin, options: Options, cache: OptionsCache
) -> ExclusionSettingsResponse:
    return await _describe(plugin, options, cache)


@router.put("", response_model=ExclusionSettingsResponse, summary="Update exclusion settings")
async def update_exclusions(
    body: UpdateExclusionsRequest, plugin: Plugin, options: Options, cache: OptionsCache
) -> ExclusionSettingsResponse:
    """Sanitize and store any of blog/search/feed; omitted settings are left as they are."""
    for name, raw in body.model_dump(exclude_unset=True).items():
        setting = ExclusionSetting(name)
        stored = await options.update_option(setting.option_name, raw or "")
        cache.set(setting.option_name, stored)
        await logger.ainfo("exclusions.updated", setting=setting.value, value=stored)
    return await _describe(plugin, options, cache)


@router.put("/{setting}", response_model=ExclusionSettingInfo, summary="Update one exclusion setting")
async def update_exclusion(
    setting: str, body: UpdateExclusionRequest, plugin: Plugin, options: Options, cache: OptionsCache
) -> ExclusionSettingInfo:
    target = _lookup(setting)
    stored = await options.update_option(target.option_name, body.value)
    cache.set(target.option_name, stored)
    await logger.ainfo("exclusions.updated", setting=target.value, value=stored)

    response = await _describe(plugin, options, cache)
    return next(s for s in response.settings if s.setting == target.value)
