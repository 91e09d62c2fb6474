"""Redis cache store implementation."""

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

import redis

from cacheproxy.core.interfaces.serializer import ISerializer
from cacheproxy.infrastructure.serializers.json import JsonSerializer
from cacheproxy_redis.expiry import expire_seconds

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis store for CacheProxy in multi-process deployments.

    Values are encoded with a serializer (JSON by default) and written
    with ``SET ... EX``. A miss is a plain GET followed by SET, so
    processes missing at the same time each call the producer and the
    last write wins.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "cacheproxy",
        default_ttl: int | None = 86400,
        serializer: ISerializer | None = None,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_url: Redis connection URL. Ignored if client is given.
            key_prefix: Prefix for all cache keys.
            default_ttl: Default TTL in seconds. None stores without expiry.
            serializer: Encoder for stored values.
            client: Existing Redis client to use.
        """
        self._redis: redis.Redis = client if client is not None else redis.from_url(redis_url)
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl
        self._serializer = serializer or JsonSerializer()

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
            The decoded stored value. A miss returns the decoded form of
            what was just written, so it matches every later hit.
        """
        prefixed_key = self._prefixed_key(key)
        cached = self._redis.get(prefixed_key)
        if cached is not None:
            return self._serializer.deserialize(cached)

        data = self._serializer.serialize(compute())
        expires = self._default_ttl if ttl is None else expire_seconds(ttl)
        if ttl is not None and expires is None:
            logger.debug("Not storing %s, ttl %s has already elapsed", prefixed_key, ttl)
        else:
            logger.debug("Storing %s for %ss", prefixed_key, expires)
            self._redis.set(prefixed_key, data, ex=expires)
        return self._serializer.deserialize(data)

    def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        result = self._redis.delete(self._prefixed_key(key))
        return bool(result)

    def _prefixed_key(self, key: str) -> str:
        """Add prefix to key if not already present."""
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisCacheStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
