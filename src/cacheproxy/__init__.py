"""cacheproxy - Transparent proxies for values kept in a TTL cache.

A CacheProxy wraps a zero-argument producer and a cache store. Reading
from the proxy reads the value from the store, calling the producer and
storing its result on a miss. Stored values are plain structure: model
objects are flattened to attribute mappings and come back as
DynamicRecord objects with attribute access.

Example:
    from datetime import timedelta
    from cacheproxy import CacheProxy, InMemoryCacheStore, fetch_records

    store = InMemoryCacheStore()

    PORTALS = CacheProxy(
        store,
        lambda: fetch_records(conn, "SELECT id, name, active FROM portals"),
        key="PORTALS",
        ttl=timedelta(hours=1),
    )

    portal = PORTALS[0]
    portal.name
    portal.is_active

    PORTALS.invalidate()

Distributed stores are available from the ``cacheproxy_redis`` package.
"""

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
from cacheproxy.core.services import (
    AsyncCacheProxy,
    CacheProxy,
    ValueKind,
    as_attributes,
    deserialize,
    serialize,
)
from cacheproxy.decorators import async_cache_proxy, cache_proxy
from cacheproxy.infrastructure import (
    InMemoryCacheBackend,
    InMemoryCacheStore,
    JsonSerializer,
    fetch_records,
)
from cacheproxy.utils import normalize_key, parse_bool

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "DynamicRecord",
    "ProxyConfig",
    "ProxyKey",
    # Exceptions
    "CacheProxyError",
    "SerializationError",
    "UnsupportedOperationError",
    # Core interfaces
    "ICacheBackend",
    "ICacheStore",
    "IRecordLike",
    "ISerializer",
    # Core services
    "CacheProxy",
    "AsyncCacheProxy",
    "ValueKind",
    "serialize",
    "deserialize",
    "as_attributes",
    # Infrastructure implementations
    "InMemoryCacheStore",
    "InMemoryCacheBackend",
    "JsonSerializer",
    "fetch_records",
    # Decorators
    "cache_proxy",
    "async_cache_proxy",
    # Utilities
    "parse_bool",
    "normalize_key",
]
