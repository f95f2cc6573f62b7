"""Content query hook schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from exclude_categories.core.query import CATEGORY_NOT_IN, ContentQuery


class ContentQueryRequest(BaseModel):
    """A content listing request as classified by the host."""

    is_main_query: bool = True
    is_admin: bool = False
    is_home: bool = False
    is_feed: bool = False
    is_search: bool = False
    # Passed through untouched; the hook reads non-list values as empty
    category__not_in: Any = None

    def to_query(self) -> ContentQuery:
        query_vars: dict[str, Any] = {}
        if self.category__not_in is not None:
            query_vars[CATEGORY_NOT_IN] = self.category__not_in
        return ContentQuery(
            main_query=self.is_main_query,
            admin=self.is_admin,
            home=self.is_home,
            feed=self.is_feed,
            search=self.is_search,
            query_vars=query_vars,
        )


class ContentQueryResponse(BaseModel):
    category__not_in: Any = None
    setting: str | None = None
    modified: bool = False
