"""In-memory async cache backend implementation."""

import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Item(NamedTuple):
    data: bytes
    ttl: float


def _expires_at(_key: str, item: _Item, now: float) -> float:
    return now + item.ttl


class InMemoryCacheBackend:
    """In-memory async backend using LRU with per-item TTL.

    Suitable for single-process deployments and tests of
    AsyncCacheProxy. All operations run on the event loop thread.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 86400.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: Default TTL in seconds for items.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=_expires_at,
            timer=timer,
        )

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        item = self._cache.get(key)
        return None if item is None else item.data

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses default.
        """
        seconds = self._default_ttl if ttl is None else ttl.total_seconds()
        self._cache[key] = _Item(value, seconds)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        if key not in self._cache:
            return False
        del self._cache[key]
        return True

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
