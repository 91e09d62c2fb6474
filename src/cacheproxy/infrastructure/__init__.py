"""Infrastructure layer implementations for cacheproxy."""

from cacheproxy.infrastructure.backends import InMemoryCacheBackend
from cacheproxy.infrastructure.serializers import JsonSerializer
from cacheproxy.infrastructure.sql import fetch_records
from cacheproxy.infrastructure.stores import InMemoryCacheStore

__all__ = [
    "InMemoryCacheStore",
    "InMemoryCacheBackend",
    "JsonSerializer",
    "fetch_records",
]
