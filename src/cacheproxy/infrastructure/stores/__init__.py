"""Cache store implementations."""

from cacheproxy.infrastructure.stores.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
