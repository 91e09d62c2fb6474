"""Proxy configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class ProxyConfig:
    """Proxy configuration.

    Shared by every proxy built with it. There is no global
    configuration; pass a ProxyConfig to each proxy that needs one.

    Attributes:
        enabled: When False, proxies skip the store and call the
            producer on every resolve.
        default_ttl: TTL used when a proxy is built without one.
        key_prefix: Optional namespace prepended to every cache key.
    """

    enabled: bool = True
    default_ttl: timedelta | None = None
    key_prefix: str | None = None

    def __post_init__(self) -> None:
        """Set default TTL if not provided."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(days=1)
