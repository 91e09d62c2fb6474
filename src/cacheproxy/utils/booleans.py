"""Boolean parsing for loosely typed stored values."""

from typing import Any

TRUE_STRINGS = frozenset({"true", "t", "1"})


def parse_bool(value: Any) -> bool:
    """Interpret a stored value as a boolean.

    Database columns and cached payloads often carry flags as ``1``,
    ``"t"`` or ``"true"`` rather than real booleans.

    Args:
        value: Any value, typically read from a record.

    Returns:
        True for ``True``, numbers equal to 1 and the strings "true",
        "t" or "1" (any case). False for everything else, including None.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False
