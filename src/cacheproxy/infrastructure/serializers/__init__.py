"""Serializer implementations."""

from cacheproxy.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
