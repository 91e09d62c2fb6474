"""Operations a proxy may forward to a resolved value.

Resolved values are DynamicRecords, sequences or scalars. Each kind
has a table of the operations CacheProxy.invoke forwards. Mutating
operations are refused for every kind: they would only change a
freshly resolved copy that is never written back to the store.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from cacheproxy.core.exceptions import UnsupportedOperationError


class ValueKind(str, Enum):
    """Shape of a resolved value."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


_COMMON_OPERATIONS = frozenset({
    "__contains__",
    "__eq__",
    "__getitem__",
    "__iter__",
    "__len__",
    "__ne__",
    "__repr__",
    "__reversed__",
    "__str__",
})

MAPPING_OPERATIONS = _COMMON_OPERATIONS | {
    "__or__",
    "copy",
    "get",
    "get_bool",
    "items",
    "keys",
    "logical_type",
    "to_dict",
    "values",
}

SEQUENCE_OPERATIONS = _COMMON_OPERATIONS | {
    "__add__",
    "__ge__",
    "__gt__",
    "__le__",
    "__lt__",
    "__mul__",
    "__rmul__",
    "copy",
    "count",
    "index",
}

MUTATING_OPERATIONS = frozenset({
    "__delattr__",
    "__delitem__",
    "__iadd__",
    "__imul__",
    "__ior__",
    "__setattr__",
    "__setitem__",
    "append",
    "clear",
    "extend",
    "insert",
    "pop",
    "popitem",
    "remove",
    "reverse",
    "set",
    "setdefault",
    "sort",
    "update",
})

CAPABILITIES: dict[ValueKind, frozenset[str]] = {
    ValueKind.MAPPING: MAPPING_OPERATIONS,
    ValueKind.SEQUENCE: SEQUENCE_OPERATIONS,
}


def kind_of(value: Any) -> ValueKind:
    """Classify a resolved value."""
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def lookup_operation(value: Any, operation: str) -> Callable[..., Any]:
    """Find the bound method for an operation on a resolved value.

    Scalars accept any non-mutating method they define.

    Args:
        value: The resolved value.
        operation: Method name, e.g. "get" or "__getitem__".

    Returns:
        The bound method.

    Raises:
        UnsupportedOperationError: If the operation mutates, is not in
            the value kind's table, or is not callable on the value.
    """
    if operation in MUTATING_OPERATIONS:
        raise UnsupportedOperationError(
            f"{operation!r} would modify a resolved copy that is never stored"
        )

    kind = kind_of(value)
    allowed = CAPABILITIES.get(kind)
    if allowed is not None and operation not in allowed:
        raise UnsupportedOperationError(
            f"{kind.value} values do not support {operation!r}"
        )

    try:
        method = getattr(value, operation)
    except AttributeError:
        raise UnsupportedOperationError(
            f"{type(value).__name__} has no operation {operation!r}"
        ) from None

    if not callable(method):
        raise UnsupportedOperationError(
            f"{operation!r} is not callable on {type(value).__name__}"
        )
    return method  # type: ignore[no-any-return]
