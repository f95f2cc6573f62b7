"""
Classified content query.

The host decides what kind of listing a request produces and exposes that
as predicates; query vars carry the listing constraints, including the
``category__not_in`` exclusion field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

CATEGORY_NOT_IN = "category__not_in"


class ClassifiedRequest(Protocol):
    def is_main_query(self) -> bool: ...

    def is_admin(self) -> bool: ...

    def is_home(self) -> bool: ...

    def is_feed(self) -> bool: ...

    def is_search(self) -> bool: ...

    def get(self, name: str, default: Any = None) -> Any: ...

    def set(self, name: str, value: Any) -> None: ...


@dataclass
class ContentQuery:
    """Concrete ClassifiedRequest for hosts that describe requests as data."""

    main_query: bool = True
    admin: bool = False
    home: bool = False
    feed: bool = False
    search: bool = False
    query_vars: dict[str, Any] = field(default_factory=dict)

    def is_main_query(self) -> bool:
        return self.main_query

    def is_admin(self) -> bool:
        return self.admin

    def is_home(self) -> bool:
        return self.home

    def is_feed(self) -> bool:
        return self.feed

    def is_search(self) -> bool:
        return self.search

    def get(self, name: str, default: Any = None) -> Any:
        return self.query_vars.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.query_vars[name] = value
