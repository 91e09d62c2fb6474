"""Record-like capability interface."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IRecordLike(Protocol):
    """An object that can present itself as a flat attribute mapping.

    Implement ``to_dict`` on model classes whose instances a producer
    returns. Named tuples, DB-API row wrappers exposing ``_asdict`` and
    dataclass instances are recognized without it.
    """

    def to_dict(self) -> Mapping[str, Any]:
        """Return attribute name to value."""
        ...
