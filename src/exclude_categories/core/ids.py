"""
Category ID set helpers.

A category ID set is an ordered, duplicate-free list of positive integers.
Its canonical serialization is the IDs joined with single commas; the empty
set serializes to "".
"""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterable
from typing import Any

_LEADING_INT = re.compile(r"\s*[+-]?([0-9]+)")

# Casts saturate here, like a 64-bit intval
MAX_ID = sys.maxsize
_MAX_DIGITS = len(str(MAX_ID))


def absint(value: Any) -> int:
    """Absolute integer cast, saturating at MAX_ID. Anything that does not start with digits is 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return min(abs(value), MAX_ID)
    if isinstance(value, float):
        return min(abs(int(value)), MAX_ID) if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0
    match = _LEADING_INT.match(value)
    if not match:
        return 0
    digits = match.group(1).lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return MAX_ID
    return min(int(digits or "0"), MAX_ID)


def unique_ids(values: Iterable[Any]) -> list[int]:
    """Cast every value with absint, drop zeros and repeats, keep first-seen order."""
    seen: set[int] = set()
    ids: list[int] = []
    for value in values:
        category_id = absint(value)
        if category_id and category_id not in seen:
            seen.add(category_id)
            ids.append(category_id)
    return ids


def parse_ids(text: str) -> list[int]:
    return unique_ids(text.split(","))


def join_ids(ids: Iterable[int]) -> str:
    return ",".join(str(i) for i in ids)


def coerce_ids(value: Any) -> list[int]:
    """
    Read an existing exclusion field.

    Only list-like values carry IDs; None, scalars and mappings read as empty.
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        return unique_ids(value)
    return []


def merge_ids(existing: Iterable[int], extra: Iterable[int]) -> list[int]:
    """Ordered union, existing IDs first."""
    return unique_ids([*existing, *extra])
