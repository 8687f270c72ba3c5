"""Null cache implementation.

This cache always misses. Use it when results must be recomputed on
every call, e.g. with ``TRAVEL_SEARCH_CACHE_RESULTS=false`` or in tests
that count solver invocations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - always misses."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {
            "size": 0,
            "hits": 0,
            "misses": 0,
            "hit_rate_percent": 0,
        }
