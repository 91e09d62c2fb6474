"""Exceptions raised by cacheproxy."""


class CacheProxyError(Exception):
    """Base class for cacheproxy errors."""

    pass


class UnsupportedOperationError(CacheProxyError, NotImplementedError):
    """Raised when an operation is not available on a record or proxy.

    Covers boolean-query attribute setters on records and operations
    outside a proxied value's capability table.
    """

    pass


class SerializationError(CacheProxyError):
    """Raised when serialization or deserialization fails."""

    pass
