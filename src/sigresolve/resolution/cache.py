"""Memoization for resolution results.

Both successful resolutions and resolution errors are cached: resolution is a
pure function of (candidates, arguments), so a failure is as final as a
success.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from sigresolve.resolution.result import ResolutionResult

_Key = tuple[tuple[int, ...], tuple[Any, ...]]


class ResolutionCache:
    """Bounded, thread-safe map of (candidates, arguments) -> ResolutionResult.

    Candidates are keyed by identity, so equal-looking candidates from
    different catalogs never share an entry. Each entry keeps its candidates
    alive, which keeps their ids from being reused while the entry exists.
    Oldest entries are evicted first once `max_entries` is reached.

    Args:
        max_entries: Maximum number of cached results.
    """

    def __init__(self, max_entries: int = 1024) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[_Key, tuple[tuple[Any, ...], ResolutionResult[Any]]] = (
            OrderedDict()
        )
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        candidates: tuple[Any, ...],
        arguments: tuple[Any, ...],
        compute: Callable[[], ResolutionResult[Any]],
    ) -> ResolutionResult[Any]:
        """Return the cached result, computing and storing it on a miss.

        `compute` runs outside the lock; concurrent misses for the same key
        may both compute, and the first stored result wins.
        """
        key = (tuple(id(c) for c in candidates), arguments)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.hits += 1
                return cached[1]
            self.misses += 1

        result = compute()

        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing[1]
            self._entries[key] = (candidates, result)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
        return result

    def clear(self) -> None:
        """Drop all cached results."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
