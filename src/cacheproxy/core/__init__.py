"""Core domain layer for cacheproxy."""

from cacheproxy.core.entities import DynamicRecord, ProxyConfig, ProxyKey
from cacheproxy.core.exceptions import (
    CacheProxyError,
    SerializationError,
    UnsupportedOperationError,
)
from cacheproxy.core.interfaces import (
    ICacheBackend,
    ICacheStore,
    IRecordLike,
    ISerializer,
)
from cacheproxy.core.services import AsyncCacheProxy, CacheProxy

__all__ = [
    # Entities
    "DynamicRecord",
    "ProxyConfig",
    "ProxyKey",
    # Exceptions
    "CacheProxyError",
    "SerializationError",
    "UnsupportedOperationError",
    # Interfaces
    "ICacheBackend",
    "ICacheStore",
    "IRecordLike",
    "ISerializer",
    # Services
    "CacheProxy",
    "AsyncCacheProxy",
]
