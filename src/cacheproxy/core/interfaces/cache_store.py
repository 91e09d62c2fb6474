"""Cache store interface."""

from collections.abc import Callable
from datetime import timedelta
from typing import Any, Protocol


class ICacheStore(Protocol):
    """Contract for the key-value stores a CacheProxy reads through.

    Stores own expiry: the TTL countdown starts when a value is
    written. Values are plain mapping/sequence/scalar structures.
    """

    def fetch(
        self,
        key: str,
        ttl: timedelta | None,
        compute: Callable[[], Any],
    ) -> Any:
        """Return the value at key, computing and storing it on a miss.

        Args:
            key: The cache key.
            ttl: Expiry for a newly computed value. If None, uses the
                store default.
            compute: Called on a miss. If it raises, nothing is stored
                and the exception propagates.

        Returns:
            The stored or freshly computed value.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete the value at key.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...
