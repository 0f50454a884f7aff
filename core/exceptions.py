"""
Cache layer exceptions

Hierarchy:
- CacheError
  - SerializationError: value cannot be encoded for the store
  - DeserializationError: stored text does not decode to the requested type
  - StoreUnavailable: connection cannot be acquired or the transport failed
  - StoreCommandError: the store rejected a command (e.g. WRONGTYPE)
  - InvalidEndpoint: malformed host[:port] string

None of these are retried by the cache layer.
"""

from typing import Any


class CacheError(Exception):
    """Base exception for the cache layer"""

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SerializationError(CacheError):
    """Value could not be serialized"""

    def __init__(self, message: str = "Serialization failed", details: dict[str, Any] | None = None):
        super().__init__("SERIALIZATION_ERROR", message, details)


class DeserializationError(CacheError):
    """Stored value could not be decoded to the requested type"""

    def __init__(
        self, message: str = "Deserialization failed", details: dict[str, Any] | None = None
    ):
        super().__init__("DESERIALIZATION_ERROR", message, details)


class StoreUnavailable(CacheError):
    """Connection could not be acquired or a command failed in transport"""

    def __init__(self, message: str = "Store unavailable", details: dict[str, Any] | None = None):
        super().__init__("STORE_UNAVAILABLE", message, details)


class StoreCommandError(CacheError):
    """Store answered a command with an error reply"""

    def __init__(self, message: str = "Store command failed", details: dict[str, Any] | None = None):
        super().__init__("STORE_COMMAND_ERROR", message, details)


class InvalidEndpoint(CacheError):
    """Endpoint string is not host or host:port"""

    def __init__(self, message: str = "Invalid endpoint", details: dict[str, Any] | None = None):
        super().__init__("INVALID_ENDPOINT", message, details)


__all__ = [
    "CacheError",
    "SerializationError",
    "DeserializationError",
    "StoreUnavailable",
    "StoreCommandError",
    "InvalidEndpoint",
]
