"""Redis async cache backend implementation."""

import logging
from datetime import timedelta

import redis.asyncio as redis

from cacheproxy_redis.expiry import expire_seconds

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """Byte store in Redis for AsyncCacheProxy.

    Keys are namespaced with ``key_prefix``; values are the serializer's
    bytes, written with ``SETEX`` when an expiry applies.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "cacheproxy",
        default_ttl: int | None = 86400,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the backend.

        Args:
            redis_url: Redis connection URL. Ignored if client is given.
            key_prefix: Namespace for proxy keys.
            default_ttl: Seconds applied when the proxy passes no TTL.
                None stores without expiry.
            client: Existing async Redis client to use.
        """
        self._redis: redis.Redis = (
            client if client is not None else redis.from_url(redis_url)  # type: ignore
        )
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None on a miss."""
        return await self._redis.get(self._namespaced(key))

    async def set(self, key: str, value: bytes, ttl: timedelta | None = None) -> None:
        """Store bytes under key.

        A zero or negative ttl stores nothing, matching the in-memory
        backend.
        """
        namespaced = self._namespaced(key)
        expires = self._default_ttl if ttl is None else expire_seconds(ttl)
        if ttl is not None and expires is None:
            logger.debug("Not storing %s, ttl %s has already elapsed", namespaced, ttl)
            return
        if expires is None:
            await self._redis.set(namespaced, value)
        else:
            await self._redis.setex(namespaced, expires, value)

    async def delete(self, key: str) -> bool:
        """Delete key, returning whether it was present."""
        return await self._redis.delete(self._namespaced(key)) > 0

    def _namespaced(self, key: str) -> str:
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        await self.close()
