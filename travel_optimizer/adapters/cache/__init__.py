"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe in-memory cache with FIFO eviction
- NullCache: No-op cache (always misses)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache

__all__ = ["InMemoryCache", "NullCache"]
