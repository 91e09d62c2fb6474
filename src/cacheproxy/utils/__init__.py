"""Utility helpers for cacheproxy."""

from cacheproxy.utils.booleans import parse_bool
from cacheproxy.utils.keys import normalize_key

__all__ = [
    "normalize_key",
    "parse_bool",
]
