"""Domain entities for cacheproxy."""

from cacheproxy.core.entities.cache_key import ProxyKey
from cacheproxy.core.entities.proxy_config import ProxyConfig
from cacheproxy.core.entities.record import (
    BOOLEAN_QUERY_PREFIX,
    DEFAULT_LOGICAL_TYPE,
    LOGICAL_TYPE_KEY,
    DynamicRecord,
    alternate_key,
)

__all__ = [
    "DynamicRecord",
    "ProxyConfig",
    "ProxyKey",
    "alternate_key",
    "BOOLEAN_QUERY_PREFIX",
    "DEFAULT_LOGICAL_TYPE",
    "LOGICAL_TYPE_KEY",
]
