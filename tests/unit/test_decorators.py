"""Tests for proxy decorators."""

from datetime import timedelta

import pytest

from cacheproxy import (
    AsyncCacheProxy,
    CacheProxy,
    InMemoryCacheBackend,
    InMemoryCacheStore,
    ProxyConfig,
)
from cacheproxy.decorators import async_cache_proxy, cache_proxy


class TestCacheProxyDecorator:
    """Tests for @cache_proxy."""

    def test_returns_proxy(self, store: InMemoryCacheStore) -> None:
        """Test that the decorated producer becomes a proxy."""
        call_count = 0

        @cache_proxy(store, key="AUTHORS", ttl=timedelta(hours=1))
        def authors() -> list:
            nonlocal call_count
            call_count += 1
            return [{"id": 1, "name": "Ann"}]

        assert isinstance(authors, CacheProxy)
        assert authors.cache_key == "CacheProxy_AUTHORS"
        assert authors.ttl == timedelta(hours=1)

        assert authors[0].name == "Ann"
        assert authors[0].id == 1
        assert call_count == 1

    def test_default_key_is_stable(self, store: InMemoryCacheStore) -> None:
        """Test that the default key comes from the producer's import path."""
        def build():
            @cache_proxy(store)
            def portals() -> list:
                return []

            return portals

        first = build()
        second = build()

        assert first.cache_key == second.cache_key
        assert first.cache_key.startswith("CacheProxy_")
        assert "test_decorators" in first.cache_key
        assert first.cache_key.endswith("_portals")

    def test_config(self, store: InMemoryCacheStore) -> None:
        """Test passing a configuration."""
        @cache_proxy(store, key="X", config=ProxyConfig(key_prefix="app"))
        def value() -> int:
            return 1

        assert value.cache_key == "app_CacheProxy_X"
        assert value == 1


class TestAsyncCacheProxyDecorator:
    """Tests for @async_cache_proxy."""

    @pytest.mark.asyncio
    async def test_returns_async_proxy(self) -> None:
        """Test that the decorated coroutine becomes an async proxy."""
        backend = InMemoryCacheBackend()
        call_count = 0

        @async_cache_proxy(backend, key="AUTHORS")
        async def authors() -> list:
            nonlocal call_count
            call_count += 1
            return [{"id": 1, "name": "Ann"}]

        assert isinstance(authors, AsyncCacheProxy)

        first = await authors.resolve()
        second = await authors.resolve()

        assert first == second
        assert first[0].name == "Ann"
        assert call_count == 1
