"""In-memory cache store implementation."""

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

_MISSING = object()


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _expires_at(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class InMemoryCacheStore:
    """In-memory store using LRU eviction with per-entry TTL.

    Suitable for single-process deployments and tests. Uses cachetools
    TLRUCache, so each entry expires according to the TTL it was
    written with.

    The producer runs outside the lock: concurrent misses on one key
    may each call it, and the last write wins.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 86400.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache store.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: Default TTL in seconds for items.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=maxsize,
            ttu=_expires_at,
            timer=timer,
        )
        self._lock = threading.Lock()

    def fetch(
        self,
        key: str,
        ttl: timedelta | None,
        compute: Callable[[], Any],
    ) -> Any:
        """Return the value at key, computing and storing it on a miss.

        Args:
            key: The cache key.
            ttl: Expiry for a newly computed value. If None, uses default.
            compute: Called on a miss.

        Returns:
            The stored or freshly computed value.
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value

        value = compute()
        self.set(key, value, ttl)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.
            default: Returned if the key is missing or expired.

        Returns:
            The cached value, or ``default``.
        """
        with self._lock:
            entry = self._cache.get(key)
        return default if entry is None else entry.value

    def set(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses default.
        """
        seconds = self._default_ttl if ttl is None else ttl.total_seconds()
        logger.debug("Storing %s for %ss", key, seconds)
        with self._lock:
            self._cache[key] = _Entry(value, seconds)

    def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with self._lock:
            if key not in self._cache:
                return False
            del self._cache[key]
            return True

    def clear(self) -> None:
        """Clear all cached values."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
