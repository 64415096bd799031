"""Session-scoped memoisation of classification results."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class CacheScope(str, Enum):
    """Lifetime of a cached entry."""

    # Derived from the user agent, which never changes within a session.
    AGENT = "agent"
    # Derived from viewport geometry or pixel density; dropped on re-measure.
    VIEWPORT = "viewport"


class SnapshotCache:
    """Memoise predicate results by name within one environment session.

    Every computed value is stored, ``False`` included, so a predicate is
    evaluated at most once per scope lifetime.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheScope, dict[str, Any]] = {scope: {} for scope in CacheScope}

    def get_or_compute(self, scope: CacheScope, key: str, compute: Callable[[], T]) -> T:
        entries = self._entries[scope]
        if key not in entries:
            entries[key] = compute()
        return entries[key]

    def contains(self, scope: CacheScope, key: str) -> bool:
        return key in self._entries[scope]

    def keys(self, scope: CacheScope) -> list[str]:
        return list(self._entries[scope])

    def invalidate(self, scope: CacheScope) -> None:
        dropped = len(self._entries[scope])
        self._entries[scope].clear()
        if dropped:
            _LOGGER.debug("Dropped %d cached %s predicate(s)", dropped, scope.value)

    def clear(self) -> None:
        for scope in CacheScope:
            self._entries[scope].clear()


__all__ = ["CacheScope", "SnapshotCache"]
