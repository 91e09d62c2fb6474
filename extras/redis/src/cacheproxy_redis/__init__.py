"""Redis stores for cacheproxy."""

from cacheproxy_redis.backend import RedisCacheBackend
from cacheproxy_redis.store import RedisCacheStore

__all__ = [
    "RedisCacheBackend",
    "RedisCacheStore",
]
