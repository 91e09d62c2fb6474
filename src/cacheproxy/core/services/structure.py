"""Structural serialization between produced values and stored data.

Stored data never references a Python class: record-like objects are
flattened to their attribute mappings on the way in, and every mapping
comes back out as a DynamicRecord. A stored entry therefore stays
readable after the model classes that produced it change.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from cacheproxy.core.entities.record import DynamicRecord
from cacheproxy.core.interfaces.record_like import IRecordLike


def as_attributes(value: Any) -> Mapping[Any, Any] | None:
    """Return the flat attribute mapping of a record-like object.

    Args:
        value: Any value.

    Returns:
        The attribute mapping, or None if the value is not record-like.
    """
    if isinstance(value, type):
        return None
    if isinstance(value, IRecordLike) and callable(value.to_dict):
        return value.to_dict()
    as_dict = getattr(value, "_asdict", None)
    if callable(as_dict):
        return as_dict()  # type: ignore[no-any-return]
    if dataclasses.is_dataclass(value):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    return None


def serialize(value: Any) -> Any:
    """Reduce a produced value to mapping/sequence/scalar structure.

    Args:
        value: The producer's result.

    Returns:
        Record-like objects as attribute dicts, lists and tuples
        element-wise, mappings with keys and values serialized, and
        anything else unchanged.
    """
    attributes = as_attributes(value)
    if attributes is not None:
        return _serialize_mapping(attributes)
    if isinstance(value, list):
        return [serialize(item) for item in value]
    if isinstance(value, tuple):
        return tuple(serialize(item) for item in value)
    if isinstance(value, Mapping):
        return _serialize_mapping(value)
    return value


def deserialize(data: Any) -> Any:
    """Rehydrate stored structure, turning every mapping into a record.

    Args:
        data: A value read from a store.

    Returns:
        Lists and tuples element-wise, a DynamicRecord for mappings,
        and anything else unchanged.
    """
    if isinstance(data, list):
        return [deserialize(item) for item in data]
    if isinstance(data, tuple):
        return tuple(deserialize(item) for item in data)
    if isinstance(data, Mapping):
        return DynamicRecord(data)
    return data


def _serialize_mapping(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    return {serialize(key): serialize(value) for key, value in mapping.items()}
