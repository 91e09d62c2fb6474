"""Tests for InMemoryCacheStore."""

from datetime import timedelta

import pytest

from cacheproxy.infrastructure.stores.memory import InMemoryCacheStore


class TestInMemoryCacheStore:
    """Tests for InMemoryCacheStore."""

    def test_fetch_computes_on_miss(self, store: InMemoryCacheStore) -> None:
        """Test that fetch stores the computed value."""
        result = store.fetch("key1", None, lambda: [1, 2])

        assert result == [1, 2]
        assert store.get("key1") == [1, 2]

    def test_fetch_skips_compute_on_hit(self, store: InMemoryCacheStore) -> None:
        """Test that a hit does not call compute."""
        store.set("key1", "cached")

        def compute() -> str:
            raise AssertionError("compute should not run")

        assert store.fetch("key1", None, compute) == "cached"

    def test_fetch_error_stores_nothing(self, store: InMemoryCacheStore) -> None:
        """Test that a failing compute leaves no entry."""
        def compute() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            store.fetch("key1", None, compute)

        assert store.get("key1", "absent") == "absent"

    def test_per_entry_ttl(self, store: InMemoryCacheStore, clock) -> None:
        """Test that each entry expires with its own TTL."""
        store.set("short", 1, timedelta(seconds=10))
        store.set("long", 2, timedelta(seconds=100))

        clock.advance(50)

        assert store.get("short") is None
        assert store.get("long") == 2
        assert len(store) == 1

    def test_default_ttl(self, clock) -> None:
        """Test that entries without a TTL use the store default."""
        store = InMemoryCacheStore(default_ttl=60.0, timer=clock)
        store.set("key1", "value")

        clock.advance(59)
        assert store.get("key1") == "value"

        clock.advance(2)
        assert store.get("key1") is None

    def test_zero_ttl_not_stored(self, store: InMemoryCacheStore) -> None:
        """Test that a zero TTL value is returned but not kept."""
        assert store.fetch("key1", timedelta(0), lambda: "x") == "x"
        assert store.get("key1") is None

    def test_delete(self, store: InMemoryCacheStore) -> None:
        """Test deleting a key."""
        store.set("key1", "value1")

        assert store.delete("key1") is True
        assert store.get("key1") is None
        assert store.delete("key1") is False

    def test_delete_expired(self, store: InMemoryCacheStore, clock) -> None:
        """Test that deleting an expired key reports nothing deleted."""
        store.set("key1", "value1", timedelta(seconds=1))
        clock.advance(5)

        assert store.delete("key1") is False

    def test_clear(self, store: InMemoryCacheStore) -> None:
        """Test clearing all keys."""
        store.set("key1", 1)
        store.set("key2", 2)

        store.clear()

        assert len(store) == 0

    def test_max_size(self) -> None:
        """Test that eviction keeps the cache within maxsize."""
        store = InMemoryCacheStore(maxsize=2)

        store.set("a", 1)
        store.set("b", 2)
        store.set("c", 3)

        assert store.maxsize == 2
        assert len(store) == 2
        assert store.get("c") == 3
