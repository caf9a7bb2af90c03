"""Keyword search over a store snapshot.

Search is a pure function of ``(items, keyword)``: it never touches the
store and returns a new tuple on every call.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from pymova._constants import REGEX_SPECIAL_CHARS

T = TypeVar("T")

DEFAULT_SEARCH_FIELDS: tuple[str, ...] = ("title", "content")


def escape_keyword(keyword: str) -> str:
    """Backslash-escape regex metacharacters so *keyword* matches literally."""
    return "".join(f"\\{ch}" if ch in REGEX_SPECIAL_CHARS else ch for ch in keyword)


def compile_keyword(keyword: str) -> re.Pattern[str]:
    return re.compile(escape_keyword(keyword), re.IGNORECASE)


def search_items(
    items: Iterable[T],
    keyword: str,
    *,
    default_filter: Callable[[T], bool] | None = None,
    fields: Sequence[str] = DEFAULT_SEARCH_FIELDS,
) -> tuple[T, ...]:
    """Filter *items* by *keyword*.

    An empty keyword returns the default view: the items accepted by
    *default_filter*, or all items when there is none.  Otherwise every
    item is considered (including the ones the default view hides) and it
    matches when any of *fields* contains the keyword, ignoring case.
    """
    if not keyword:
        if default_filter is None:
            return tuple(items)
        return tuple(item for item in items if default_filter(item))

    pattern = compile_keyword(keyword)
    return tuple(
        item
        for item in items
        if any(pattern.search(str(getattr(item, name, "") or "")) for name in fields)
    )
