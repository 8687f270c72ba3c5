"""Thread-safe in-memory cache implementation.

Used by the route solver to memoize schedules for the graph it is
currently serving. Entries never expire on their own; the solver clears
the cache whenever a new catalog is loaded.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache with FIFO eviction.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[OptimalSchedule](name="schedules", max_size=1000)
        schedule = cache.get_or_compute(key, lambda: solve(graph, request))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: Dict[str, T] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._hits += 1
            return self._store[key]

    def set(self, key: str, value: T) -> None:
        with self._lock:
            if (
                self.max_size is not None
                and key not in self._store
                and len(self._store) >= self.max_size
            ):
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )

            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        The compute function runs outside the lock, so two threads missing
        on the same key may both compute it; the last write wins.
        """
        value = self.get(key)
        if value is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return value

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.debug("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts, hit rate and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
