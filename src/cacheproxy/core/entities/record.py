"""Dynamic record entity.

A schema-free mapping that stands in for database rows and other
record objects once they have been through a cache store. Only plain
mapping/sequence/scalar structure survives the store, so the record
never depends on the class that originally produced the data.

Example:
    record = DynamicRecord({"name": "London", "id": 100, "active": 1})
    record.name          # "London"
    record.is_active     # True
    record.missing       # None
"""

from collections.abc import Iterable, Mapping
from typing import Any

from cacheproxy.core.exceptions import UnsupportedOperationError
from cacheproxy.utils.booleans import parse_bool

LOGICAL_TYPE_KEY = "_class"
DEFAULT_LOGICAL_TYPE = "DynamicRecord"
BOOLEAN_QUERY_PREFIX = "is_"

_MISSING = object()


def alternate_key(key: Any) -> Any | None:
    """Return the other representation of a key, if it has one.

    Text keys pair with their UTF-8 bytes form and vice versa, which is
    how keys look when a payload was decoded without text decoding.

    Args:
        key: A record key.

    Returns:
        The alternate key, or None when the key has no alternate form.
    """
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, bytes):
        try:
            return key.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


class DynamicRecord(dict[Any, Any]):
    """Mapping with attribute-style access and deep construction.

    Nested mappings, including those inside lists and tuples, are
    converted to DynamicRecord on construction and assignment.
    Attribute reads never raise for unknown names; they return None.
    """

    __slots__ = ()

    def __init__(
        self,
        mapping: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
        /,
        **kwargs: Any,
    ) -> None:
        """Build a record from a mapping or key/value pairs.

        Args:
            mapping: Initial contents.
            **kwargs: Additional string-keyed entries.
        """
        super().__init__()
        if mapping is not None:
            self.update(mapping)
        if kwargs:
            self.update(kwargs)

    @classmethod
    def convert(cls, value: Any) -> Any:
        """Recursively convert nested mappings into records.

        Args:
            value: Any value.

        Returns:
            A DynamicRecord for mappings, a sequence of converted items
            for lists and tuples, and the value itself otherwise.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        if isinstance(value, list):
            return [cls.convert(item) for item in value]
        if isinstance(value, tuple):
            return tuple(cls.convert(item) for item in value)
        return value

    # Mapping protocol

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(key, self.convert(value))

    def __missing__(self, key: Any) -> Any:
        alternate = alternate_key(key)
        if alternate is not None and dict.__contains__(self, alternate):
            return dict.__getitem__(self, alternate)
        raise KeyError(key)

    def update(self, other: Any = (), /, **kwargs: Any) -> None:  # type: ignore[override]
        """Update entries, converting nested mappings."""
        pairs = other.items() if isinstance(other, Mapping) else other
        for key, value in pairs:
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return dict.__getitem__(self, key)

    def copy(self) -> "DynamicRecord":
        return type(self)(self)

    def __or__(self, other: Any) -> "DynamicRecord":
        if not isinstance(other, Mapping):
            return NotImplemented
        merged = self.copy()
        merged.update(other)
        return merged

    def __ior__(self, other: Any) -> "DynamicRecord":
        self.update(other)
        return self

    def get(self, key: Any, default: Any = None) -> Any:
        """Look up a key, falling back to its alternate representation.

        Args:
            key: The key to look up.
            default: Returned when neither key form is present.

        Returns:
            The stored value or ``default``.
        """
        try:
            return self[key]
        except KeyError:
            return default

    def get_bool(self, key: Any) -> bool:
        """Look up a key and interpret the value with parse_bool."""
        return parse_bool(self.get(key))

    def set(self, key: Any, value: Any) -> None:
        """Assign a value, reusing whichever key form already exists.

        Args:
            key: The key to assign.
            value: The new value.
        """
        target = key
        if key not in self:
            alternate = alternate_key(key)
            if alternate is not None and alternate in self:
                target = alternate
        self[target] = value

    # Attribute access

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        if name.startswith(BOOLEAN_QUERY_PREFIX) and len(name) > len(BOOLEAN_QUERY_PREFIX):
            value = self.get(name[len(BOOLEAN_QUERY_PREFIX):], _MISSING)
            if value is _MISSING:
                value = self.get(name)
            return parse_bool(value)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith(BOOLEAN_QUERY_PREFIX):
            raise UnsupportedOperationError(
                f"{name!r} is a boolean query and cannot be assigned"
            )
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self) -> list[str]:
        keys = [key for key in self if isinstance(key, str) and key.isidentifier()]
        return sorted(set(super().__dir__()) | set(keys))

    # Introspection

    def logical_type(self) -> str:
        """Return the display type name tagged under ``_class``.

        Returns:
            The tagged name, or "DynamicRecord" when untagged.
        """
        tag = self.get(LOGICAL_TYPE_KEY)
        return str(tag) if tag else DEFAULT_LOGICAL_TYPE

    def to_dict(self) -> dict[Any, Any]:
        """Return a deep copy made of plain dicts and lists."""
        return {key: _plain(value) for key, value in self.items()}

    def __repr__(self) -> str:
        return f"{self.logical_type()}({dict.__repr__(self)})"


def _plain(value: Any) -> Any:
    if isinstance(value, DynamicRecord):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_plain(item) for item in value)
    return value
