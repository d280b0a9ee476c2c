"""TTL-based response cache for upstream news payloads."""

import time
from collections import OrderedDict
from typing import Any, Optional
from dataclasses import dataclass

from ..config import get_settings


@dataclass
class CacheEntry:
    """A single cached upstream payload."""
    data: Any
    timestamp: float  # fetchedAt, epoch seconds


class Cache:
    """In-memory cache with a process-wide TTL.

    Expiry is checked lazily: an entry found stale on ``get`` is deleted
    there and then. Nothing sweeps the store in the background.

    Accessed only from the event loop, so ``get``/``set`` need no lock.
    """

    def __init__(self, ttl: float, max_entries: int = 0):
        self.ttl = ttl
        self.max_entries = max_entries
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()

    def get(self, key: str) -> Optional[Any]:
        """Get cached data if not expired."""
        entry = self._cache.get(key)
        if entry is None:
            return None

        if time.time() - entry.timestamp > self.ttl:
            # Expired
            del self._cache[key]
            return None

        return entry.data

    def set(self, key: str, data: Any) -> None:
        """Store data under key, stamped with the current time."""
        if key in self._cache:
            self._cache.move_to_end(key)
        self._cache[key] = CacheEntry(data=data, timestamp=time.time())

        if self.max_entries > 0:
            while len(self._cache) > self.max_entries:
                self._cache.popitem(last=False)

    def invalidate(self, key: str) -> None:
        """Invalidate a cache entry."""
        if key in self._cache:
            del self._cache[key]

    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        return key in self._cache


def _build_cache() -> Cache:
    settings = get_settings()
    return Cache(ttl=settings.news_cache_ttl, max_entries=settings.news_cache_max_entries)


# Global cache instance
cache = _build_cache()
