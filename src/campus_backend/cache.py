"""
Process-wide expiring key-value cache.

This module provides the caching primitive every entity repository depends
on: one entry per entity collection (e.g. "users", "clubs"), each holding the
collection's populated records with its own time-to-live. Expired entries are
evicted lazily when read; there is no background sweep.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class ExpiringCache:
    """
    In-memory cache with per-entry TTL.

    Features:
    - Simple key-value caching with TTL (seconds)
    - Lazy eviction on read
    - Injectable clock for deterministic tests
    - Hit/miss statistics

    Example:
        >>> cache = ExpiringCache(default_ttl=600)
        >>> cache.put("users", users, ttl=180)
        >>> cache.get("users")
        >>> cache.delete("users")
    """

    def __init__(
        self,
        default_ttl: float = 600,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize cache instance.

        Args:
            default_ttl: Time-to-live in seconds used when put() gets no ttl
            clock: Callable returning the current time in seconds
                   (default: time.monotonic)
        """
        self.default_ttl = default_ttl
        self.clock = clock or time.monotonic
        self._entries: Dict[str, CacheEntry] = {}
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
        }

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache by key.

        Returns:
            Cached value, or None if the key is absent or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            self._stats["misses"] += 1
            logger.debug(f"Cache MISS: {key}")
            return None

        if entry.is_expired(self.clock()):
            del self._entries[key]
            self._stats["misses"] += 1
            logger.debug(f"Cache EXPIRED: {key}")
            return None

        self._stats["hits"] += 1
        logger.debug(f"Cache HIT: {key}")
        return entry.value

    def put(self, key: str, value: Any, ttl: Optional[float] = None):
        """
        Set value in cache, replacing any previous entry for key.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time-to-live in seconds; ttl <= 0 expires immediately
        """
        ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(value=value, expires_at=self.clock() + ttl)
        self._stats["sets"] += 1
        logger.debug(f"Cache SET: {key} (ttl={ttl}s)")

    def delete(self, key: str):
        """Remove a key immediately, regardless of its TTL."""
        if self._entries.pop(key, None) is not None:
            self._stats["deletes"] += 1
            logger.debug(f"Cache DELETE: {key}")

    def contains(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self.clock())

    def keys(self) -> List[str]:
        """Keys of all unexpired entries."""
        now = self.clock()
        return [key for key, entry in self._entries.items() if not entry.is_expired(now)]

    def clear(self):
        """
        Remove every entry.

        Primarily useful for testing and development.
        """
        self._entries.clear()
        logger.warning("Cache CLEARED")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with hit/miss/set/delete counts and hit rate
        """
        hit_rate = 0.0
        if self._stats["hits"] + self._stats["misses"] > 0:
            hit_rate = self._stats["hits"] / (self._stats["hits"] + self._stats["misses"])

        return {
            **self._stats,
            "entries": len(self._entries),
            "hit_rate": hit_rate,
        }

    def reset_stats(self):
        """Reset cache statistics counters."""
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
        }


_cache: Optional[ExpiringCache] = None
_cache_lock = threading.Lock()


def get_cache() -> ExpiringCache:
    """
    Get the process-wide cache instance.

    Every repository built without an explicit cache shares this instance,
    so cache keys must be unique across entity types.
    """
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                from campus_backend.settings import settings
                _cache = ExpiringCache(default_ttl=settings.CACHE_DEFAULT_TTL)
    return _cache
