"""Async cache backend implementations."""

from cacheproxy.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
