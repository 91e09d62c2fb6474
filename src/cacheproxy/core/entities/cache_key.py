"""Cache key value object."""

import uuid
from dataclasses import dataclass
from typing import Any

from cacheproxy.utils.keys import normalize_key


@dataclass(frozen=True)
class ProxyKey:
    """Immutable cache key for a proxy.

    Combines an optional prefix, the proxy type name and a caller
    supplied fragment. The rendered key has every run of non-word
    characters replaced by ``_``.
    """

    type_name: str
    fragment: str
    prefix: str | None = None

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            The normalized cache key.
        """
        parts = [self.type_name, self.fragment]
        if self.prefix:
            parts.insert(0, self.prefix)
        return normalize_key(" ".join(parts))

    @classmethod
    def from_components(
        cls,
        type_name: str,
        fragment: Any | None = None,
        prefix: str | None = None,
    ) -> "ProxyKey":
        """Create a ProxyKey, generating a fragment when none is given.

        A generated fragment is unique to this call, so a proxy built
        without one never shares its entry with another proxy or with
        another process.

        Args:
            type_name: Name of the proxy type.
            fragment: Caller supplied key fragment.
            prefix: Optional namespace.

        Returns:
            A new ProxyKey instance.
        """
        if fragment is None:
            fragment = uuid.uuid4().hex
        return cls(type_name=type_name, fragment=str(fragment), prefix=prefix)
