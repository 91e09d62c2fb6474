"""Cache proxy - a long-lived stand-in for a cached value.

Proxies are meant to be bound once, typically at module level:

    AUTHORS = CacheProxy(store, load_authors, key="AUTHORS", ttl=timedelta(days=1))

The proxy never keeps the resolved value; every lookup reads the
store. Keep intermediate results in a local to avoid repeated reads:

    author = AUTHORS[126]   # one store read
    author.name
    author.id

whereas ``AUTHORS[126].name`` and ``AUTHORS[126].id`` read the store
twice.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import timedelta
from typing import Any

from cacheproxy.core.entities.cache_key import ProxyKey
from cacheproxy.core.entities.proxy_config import ProxyConfig
from cacheproxy.core.interfaces.cache_store import ICacheStore
from cacheproxy.core.services.capabilities import lookup_operation
from cacheproxy.core.services.structure import deserialize, serialize

logger = logging.getLogger(__name__)


class CacheProxy:
    """Transparent proxy over a producer whose result lives in a store.

    Operations on the proxy resolve the current value from the store,
    calling the producer on a miss, and apply to that value.
    """

    __slots__ = ("_store", "_producer", "_ttl", "_config", "_cache_key")

    def __init__(
        self,
        store: ICacheStore,
        producer: Callable[[], Any],
        key: Any | None = None,
        ttl: timedelta | None = None,
        config: ProxyConfig | None = None,
    ) -> None:
        """Initialize the proxy.

        Args:
            store: Store holding the cached value.
            producer: Zero-argument callable returning the value.
            key: Cache key fragment. Without one, a random fragment is
                used and the entry is never shared across processes.
            ttl: Expiry of stored values. Uses config default if None.
            config: Optional proxy configuration.
        """
        self._store = store
        self._producer = producer
        self._config = config or ProxyConfig()
        self._ttl = ttl if ttl is not None else self._config.default_ttl
        self._cache_key = str(
            ProxyKey.from_components(
                type(self).__name__, key, prefix=self._config.key_prefix
            )
        )

    @property
    def cache_key(self) -> str:
        """Get the store key of this proxy."""
        return self._cache_key

    @property
    def ttl(self) -> timedelta | None:
        """Get the expiry applied to stored values."""
        return self._ttl

    def resolve(self) -> Any:
        """Return the current value, populating the store on a miss.

        Returns:
            The deserialized value: DynamicRecords in place of mappings
            and record-like objects.
        """
        if not self._config.enabled:
            return deserialize(serialize(self._producer()))

        data = self._store.fetch(self._cache_key, self._ttl, self._populate)
        return deserialize(data)

    def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Resolve the value and call one of its operations.

        Args:
            operation: Method name, e.g. "get" or "__getitem__".
            *args: Positional arguments for the operation.
            **kwargs: Keyword arguments for the operation.

        Returns:
            The operation's result.

        Raises:
            UnsupportedOperationError: If the resolved value does not
                support the operation.
        """
        return lookup_operation(self.resolve(), operation)(*args, **kwargs)

    def describe(self) -> str:
        """Return the repr of the resolved value."""
        return repr(self.resolve())

    def invalidate(self) -> bool:
        """Delete the stored value so the next resolve recomputes it.

        Returns:
            True if an entry was deleted, False if none existed.
        """
        logger.debug("Invalidating %s", self._cache_key)
        return bool(self._store.delete(self._cache_key))

    def _populate(self) -> Any:
        logger.debug("Cache miss for %s, calling producer", self._cache_key)
        return serialize(self._producer())

    # Transparent access

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.resolve(), name)

    def __getitem__(self, key: Any) -> Any:
        return self.resolve()[key]

    def __len__(self) -> int:
        return len(self.resolve())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.resolve())

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self.resolve())

    def __contains__(self, item: Any) -> bool:
        return item in self.resolve()

    def __bool__(self) -> bool:
        return bool(self.resolve())

    def __eq__(self, other: object) -> bool:
        return bool(self.resolve() == _unwrap(other))

    def __ne__(self, other: object) -> bool:
        return bool(self.resolve() != _unwrap(other))

    def __lt__(self, other: Any) -> bool:
        return bool(self.resolve() < _unwrap(other))

    def __le__(self, other: Any) -> bool:
        return bool(self.resolve() <= _unwrap(other))

    def __gt__(self, other: Any) -> bool:
        return bool(self.resolve() > _unwrap(other))

    def __ge__(self, other: Any) -> bool:
        return bool(self.resolve() >= _unwrap(other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.resolve())

    def __repr__(self) -> str:
        return self.describe()


def _unwrap(value: Any) -> Any:
    if isinstance(value, CacheProxy):
        return value.resolve()
    return value
