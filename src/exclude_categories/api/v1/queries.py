"""POST /v1/queries/exclude — run the pre_get_posts hook for a host query."""

from __future__ import annotations

from fastapi import APIRouter, Request

from exclude_categories.api.deps import Options, OptionsCache
from exclude_categories.core.query import CATEGORY_NOT_IN
from exclude_categories.core.resolver import OPTION_NAMES, select_setting
from exclude_categories.schemas.queries import ContentQueryRequest, ContentQueryResponse

router = APIRouter()


@router.post(
    "/queries/exclude",
    response_model=ContentQueryResponse,
    summary="Apply category exclusions",
    description="Merges the configured excluded categories into the query's category__not_in.",
)
async def exclude_query_categories(
    body: ContentQueryRequest,
    request: Request,
    options: Options,
    cache: OptionsCache,
) -> ContentQueryResponse:
    await options.prime(cache, OPTION_NAMES)

    query = body.to_query()
    before = query.get(CATEGORY_NOT_IN)
    # No awaits between priming and the hook; the cache is read as loaded above
    request.app.state.hooks.do_action("pre_get_posts", query)
    after = query.get(CATEGORY_NOT_IN)

    setting = select_setting(query)
    return ContentQueryResponse(
        category__not_in=after,
        setting=setting.value if setting else None,
        modified=after != before,
    )
