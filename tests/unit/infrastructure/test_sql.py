"""Tests for fetch_records."""

import sqlite3
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from cacheproxy import CacheProxy, DynamicRecord, InMemoryCacheStore, fetch_records


@pytest.fixture
def connection() -> Iterator[sqlite3.Connection]:
    """Create an in-memory database with a few portals."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE portals (id INTEGER PRIMARY KEY, name TEXT, active INTEGER)")
    conn.executemany(
        "INSERT INTO portals (id, name, active) VALUES (?, ?, ?)",
        [(1, "News", 1), (2, "Sport", 0), (126, "Travel", 1)],
    )
    yield conn
    conn.close()


class TestFetchRecords:
    """Tests for fetch_records."""

    def test_rows_become_records(self, connection: sqlite3.Connection) -> None:
        """Test that each row is keyed by column name."""
        portals = fetch_records(connection, "SELECT id, name, active FROM portals ORDER BY id")

        assert len(portals) == 3
        assert all(isinstance(portal, DynamicRecord) for portal in portals)
        assert portals[0] == {"id": 1, "name": "News", "active": 1}
        assert portals[1].is_active is False

    def test_params(self, connection: sqlite3.Connection) -> None:
        """Test passing query parameters."""
        portals = fetch_records(connection, "SELECT name FROM portals WHERE id = ?", (126,))

        assert portals == [{"name": "Travel"}]

    def test_empty_result(self, connection: sqlite3.Connection) -> None:
        """Test a query without rows."""
        assert fetch_records(connection, "SELECT * FROM portals WHERE id < 0") == []

    def test_cursor_closed_on_error(self) -> None:
        """Test that the cursor is closed when the query fails."""
        connection = MagicMock()
        cursor = connection.cursor.return_value
        cursor.execute.side_effect = RuntimeError("syntax error")

        with pytest.raises(RuntimeError):
            fetch_records(connection, "SELEC 1")

        cursor.close.assert_called_once()

    def test_as_producer(self, connection: sqlite3.Connection) -> None:
        """Test caching query results through a proxy."""
        store = InMemoryCacheStore()
        portals = CacheProxy(
            store,
            lambda: fetch_records(connection, "SELECT id, name, active FROM portals ORDER BY id"),
            key="PORTALS",
        )

        assert portals[2].name == "Travel"

        connection.execute("DELETE FROM portals")
        assert portals[2].name == "Travel"

        portals.invalidate()
        assert len(portals) == 0
