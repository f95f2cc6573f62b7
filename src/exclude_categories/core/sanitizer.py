"""Administrator input sanitizing for exclusion settings."""

from __future__ import annotations

import re
from typing import Any

from exclude_categories.core.ids import join_ids, parse_ids

_NOT_ID_CHARS = re.compile(r"[^0-9,]")


def sanitize_setting(value: Any = "") -> str:
    """
    Normalize free text into a canonical category ID list.

    Every character except digits and commas is deleted, the remainder is
    split on commas, zeros and repeated IDs are dropped and the survivors are
    re-joined with single commas. Never raises:

        >>> sanitize_setting(" 12, ,7,abc,7,0,7 ")
        '12,7'
        >>> sanitize_setting("none")
        ''
    """
    text = "" if value is None else str(value)
    return join_ids(parse_ids(_NOT_ID_CHARS.sub("", text)))
