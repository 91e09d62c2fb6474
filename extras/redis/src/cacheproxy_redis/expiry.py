"""TTL conversion for Redis expiry arguments."""

import math
from datetime import timedelta


def expire_seconds(ttl: timedelta) -> int | None:
    """Convert a TTL to whole seconds for ``EX`` / ``SETEX``.

    Redis rejects an expiry of 0, so sub-second TTLs round up to one
    second.

    Returns:
        The expiry in seconds, or None for a zero or negative TTL,
        which must not be stored.
    """
    seconds = ttl.total_seconds()
    if seconds <= 0:
        return None
    return max(1, math.ceil(seconds))
