"""
Host-side memoisation of column formatter output.

Predicates never write to cells. When the same cell is rendered more than
once in a pass (e.g. a range filter needs two comparison pairs) the engine
looks the rendering up here instead.
"""

from __future__ import annotations

from typing import Callable, Hashable

from gridfilter.core.types import FilterExpression

CacheKey = tuple[int, Hashable, FilterExpression | None]

_MISSING = object()


class FormatCache:
    """
    Formatter results keyed by (row, column, filter expression).

    ``None`` is a valid cached value: it records that the column has no
    display form for that cell.

    Usage:
        cache = FormatCache()
        text = cache.get_or_compute((0, "name", expr), lambda: render(...))
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, str | None] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, key: CacheKey, compute: Callable[[], str | None]) -> str | None:
        value = self._entries.get(key, _MISSING)
        if value is not _MISSING:
            self.hits += 1
            return value
        self.misses += 1
        value = compute()
        self._entries[key] = value
        return value

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries
