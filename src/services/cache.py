"""In-memory schedule cache with TTL support."""

import threading
import time
from typing import Any, Callable, Hashable, Optional
from cachetools import TTLCache

from src import config
from src.types import CacheStatsDict

Clock = Callable[[], float]


class FixtureCache:
    """
    Thread-safe TTL cache for reconciled schedules.

    The cache is owned by its caller and reads time from an injected clock,
    so expiry can be driven explicitly in tests and workers.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        maxsize: Optional[int] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize the cache store.

        Args:
            ttl_seconds: Entry lifetime (defaults to CACHE_TTL_MINUTES)
            maxsize: Maximum number of entries (defaults to CACHE_MAXSIZE)
            clock: Callable returning the current time in seconds
        """
        if ttl_seconds is None:
            ttl_seconds = config.CACHE_TTL_MINUTES * 60
        if maxsize is None:
            maxsize = config.CACHE_MAXSIZE

        self.clock = clock
        self._cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds, timer=clock)
        self._lock = threading.RLock()

    def get(self, key: Hashable) -> Optional[Any]:
        """Get a value from the cache.

        Returns:
            Cached value or None if not found/expired
        """
        with self._lock:
            return self._cache.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        """Set a value in the cache."""
        with self._lock:
            self._cache[key] = value

    def delete(self, key: Hashable) -> bool:
        """Delete a value from the cache.

        Returns:
            True if key was deleted, False if not found
        """
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._cache.clear()

    def cleanup(self, now: Optional[float] = None) -> int:
        """Drop entries that have expired at `now`.

        Args:
            now: Reference time (defaults to the cache clock)

        Returns:
            Number of entries removed
        """
        with self._lock:
            expired = self._cache.expire(now if now is not None else self.clock())
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def stats(self) -> CacheStatsDict:
        """Get cache statistics."""
        with self._lock:
            self._cache.expire()
            return {
                "size": len(self._cache),
                "maxsize": int(self._cache.maxsize),
                "ttl": float(self._cache.ttl),
            }
