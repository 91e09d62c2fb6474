"""Decorators that turn producer functions into proxies.

Example:
    store = InMemoryCacheStore()

    @cache_proxy(store, key="AUTHORS", ttl=timedelta(days=1))
    def AUTHORS() -> list[Author]:
        return session.query(Author).all()

    AUTHORS[0].name
"""

from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cacheproxy.core.entities.proxy_config import ProxyConfig
from cacheproxy.core.interfaces.cache_backend import ICacheBackend
from cacheproxy.core.interfaces.cache_store import ICacheStore
from cacheproxy.core.interfaces.serializer import ISerializer
from cacheproxy.core.services.async_proxy import AsyncCacheProxy
from cacheproxy.core.services.proxy import CacheProxy
from cacheproxy.infrastructure.serializers.json import JsonSerializer


def cache_proxy(
    store: ICacheStore,
    key: str | None = None,
    ttl: timedelta | None = None,
    config: ProxyConfig | None = None,
) -> Callable[[Callable[[], Any]], CacheProxy]:
    """Decorator replacing a zero-argument producer with a CacheProxy.

    Unlike a CacheProxy built without a key, the default key here is
    derived from the producer's module and qualified name, so it is the
    same in every process.

    Args:
        store: Store holding the cached value.
        key: Cache key fragment. Defaults to the producer's import path.
        ttl: Expiry of stored values. Uses config default if None.
        config: Optional proxy configuration.

    Returns:
        Decorator returning the proxy.
    """

    def decorator(producer: Callable[[], Any]) -> CacheProxy:
        return CacheProxy(
            store,
            producer,
            key=key if key is not None else _producer_key(producer),
            ttl=ttl,
            config=config,
        )

    return decorator


def async_cache_proxy(
    backend: ICacheBackend,
    key: str | None = None,
    ttl: timedelta | None = None,
    serializer: ISerializer | None = None,
    config: ProxyConfig | None = None,
) -> Callable[[Callable[[], Any]], AsyncCacheProxy]:
    """Decorator replacing a producer with an AsyncCacheProxy.

    Args:
        backend: Async backend holding the encoded value.
        key: Cache key fragment. Defaults to the producer's import path.
        ttl: Expiry of stored values. Uses config default if None.
        serializer: Encoder for stored values. Defaults to JSON.
        config: Optional proxy configuration.

    Returns:
        Decorator returning the proxy.
    """

    def decorator(producer: Callable[[], Any]) -> AsyncCacheProxy:
        return AsyncCacheProxy(
            backend,
            producer,
            key=key if key is not None else _producer_key(producer),
            ttl=ttl,
            serializer=serializer if serializer is not None else JsonSerializer(),
            config=config,
        )

    return decorator


def _producer_key(producer: Callable[..., Any]) -> str:
    module = getattr(producer, "__module__", None) or "default"
    name = getattr(producer, "__qualname__", None) or type(producer).__name__
    return f"{module}.{name}"
