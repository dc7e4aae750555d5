"""Cache port - Injectable memoization abstraction.

The distance oracle memoizes its Dijkstra runs through this protocol,
which makes it easy to inspect or clear cached distances in tests.
"""

from __future__ import annotations

from typing import Callable, Hashable, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache)

    Cached values may legitimately be None (an unreachable pair), so
    implementations must tell a cached None apart from a miss.
    """

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
