"""Load query results as dynamic records."""

import logging
from collections.abc import Sequence
from typing import Any

from cacheproxy.core.entities.record import DynamicRecord

logger = logging.getLogger(__name__)


def fetch_records(
    connection: Any,
    sql: str,
    params: Sequence[Any] | dict[str, Any] = (),
) -> list[DynamicRecord]:
    """Run a query and return each row as a DynamicRecord.

    Works with any DB-API 2.0 connection. Rows come back keyed by
    column name, so they can be returned from a producer and cached
    without a model class.

    Example:
        authors = CacheProxy(
            store,
            lambda: fetch_records(conn, "SELECT id, name FROM authors"),
            key="AUTHORS",
        )

    Args:
        connection: A DB-API connection.
        sql: The query. Use the driver's placeholder style for params.
        params: Query parameters.

    Returns:
        One record per row, in cursor order.
    """
    cursor = connection.cursor()
    try:
        cursor.execute(sql, params)
        columns = [column[0] for column in cursor.description or ()]
        rows = cursor.fetchall()
    finally:
        cursor.close()

    logger.debug("Loaded %d records", len(rows))
    return [DynamicRecord(zip(columns, row)) for row in rows]
