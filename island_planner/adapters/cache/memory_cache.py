"""Thread-safe in-memory memo cache.

Used by the distance oracle to remember Dijkstra results between
queries. Keys are any hashable value; ``None`` is a valid cached
value, distinct from a miss.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache with optional size bound.

    This cache implements the CachePort protocol.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[int](name="distances")
        miles = cache.get_or_compute(("Fiji", "Samoa"), lambda: 737)
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: Dict[Hashable, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Get a value from the cache, or ``default`` on a miss."""
        with self._lock:
            value = self._store.get(key, _MISSING)
            if value is _MISSING:
                self._misses += 1
                return default
            self._hits += 1
            return value

    def set(self, key: Hashable, value: T) -> None:
        """Set a value in the cache, evicting the oldest entry when full."""
        with self._lock:
            if (
                self.max_size is not None
                and len(self._store) >= self.max_size
                and key not in self._store
            ):
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )
            self._store[key] = value

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value."""
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Clear all entries and statistics.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
