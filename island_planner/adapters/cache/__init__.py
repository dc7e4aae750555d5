"""Cache adapters - Implementations of the cache port.

Available implementations:
- InMemoryCache: Thread-safe in-memory memo cache
"""

from .memory_cache import InMemoryCache

__all__ = ["InMemoryCache"]
