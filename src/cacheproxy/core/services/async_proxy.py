"""Async cache proxy over a byte-oriented cache backend."""

import inspect
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cacheproxy.core.entities.cache_key import ProxyKey
from cacheproxy.core.entities.proxy_config import ProxyConfig
from cacheproxy.core.interfaces.cache_backend import ICacheBackend
from cacheproxy.core.interfaces.serializer import ISerializer
from cacheproxy.core.services.capabilities import lookup_operation
from cacheproxy.core.services.structure import deserialize, serialize

logger = logging.getLogger(__name__)


class AsyncCacheProxy:
    """Proxy for asyncio code.

    Same key derivation and structural rules as CacheProxy, but the
    value is encoded with a serializer and kept in an async backend.
    The producer may be a plain or an async callable. Operators are not
    forwarded since they cannot await; use ``resolve`` or ``invoke``.
    """

    __slots__ = ("_backend", "_producer", "_ttl", "_serializer", "_config", "_cache_key")

    def __init__(
        self,
        backend: ICacheBackend,
        producer: Callable[[], Any],
        serializer: ISerializer,
        key: Any | None = None,
        ttl: timedelta | None = None,
        config: ProxyConfig | None = None,
    ) -> None:
        """Initialize the proxy.

        Args:
            backend: Async backend holding the encoded value.
            producer: Zero-argument callable or coroutine function.
            serializer: Encoder for stored values.
            key: Cache key fragment. Without one, a random fragment is
                used and the entry is never shared across processes.
            ttl: Expiry of stored values. Uses config default if None.
            config: Optional proxy configuration.
        """
        self._backend = backend
        self._producer = producer
        self._serializer = serializer
        self._config = config or ProxyConfig()
        self._ttl = ttl if ttl is not None else self._config.default_ttl
        self._cache_key = str(
            ProxyKey.from_components(
                type(self).__name__, key, prefix=self._config.key_prefix
            )
        )

    @property
    def cache_key(self) -> str:
        """Get the backend key of this proxy."""
        return self._cache_key

    @property
    def ttl(self) -> timedelta | None:
        """Get the expiry applied to stored values."""
        return self._ttl

    async def resolve(self) -> Any:
        """Return the current value, populating the backend on a miss."""
        if not self._config.enabled:
            return deserialize(serialize(await self._produce()))

        cached = await self._backend.get(self._cache_key)
        if cached is not None:
            return deserialize(self._serializer.deserialize(cached))

        logger.debug("Cache miss for %s, calling producer", self._cache_key)
        encoded = self._serializer.serialize(serialize(await self._produce()))
        await self._backend.set(self._cache_key, encoded, self._ttl)
        return deserialize(self._serializer.deserialize(encoded))

    async def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Resolve the value and call one of its operations.

        Raises:
            UnsupportedOperationError: If the resolved value does not
                support the operation.
        """
        value = await self.resolve()
        return lookup_operation(value, operation)(*args, **kwargs)

    async def describe(self) -> str:
        """Return the repr of the resolved value."""
        return repr(await self.resolve())

    async def invalidate(self) -> bool:
        """Delete the stored value so the next resolve recomputes it."""
        logger.debug("Invalidating %s", self._cache_key)
        return bool(await self._backend.delete(self._cache_key))

    async def _produce(self) -> Any:
        result = self._producer()
        if inspect.isawaitable(result):
            result = await result
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} key={self._cache_key!r}>"
