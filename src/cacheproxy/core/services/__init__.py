"""Domain services for cacheproxy."""

from cacheproxy.core.services.async_proxy import AsyncCacheProxy
from cacheproxy.core.services.capabilities import (
    CAPABILITIES,
    ValueKind,
    kind_of,
    lookup_operation,
)
from cacheproxy.core.services.proxy import CacheProxy
from cacheproxy.core.services.structure import as_attributes, deserialize, serialize

__all__ = [
    "CacheProxy",
    "AsyncCacheProxy",
    # Structural rules
    "serialize",
    "deserialize",
    "as_attributes",
    # Capability table
    "CAPABILITIES",
    "ValueKind",
    "kind_of",
    "lookup_operation",
]
