"""Core interfaces (Protocol classes) for cacheproxy."""

from cacheproxy.core.interfaces.cache_backend import ICacheBackend
from cacheproxy.core.interfaces.cache_store import ICacheStore
from cacheproxy.core.interfaces.record_like import IRecordLike
from cacheproxy.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "ICacheStore",
    "IRecordLike",
    "ISerializer",
]
