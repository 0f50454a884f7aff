"""
Store endpoint model

Parses the ``host[:port]`` strings used to address a cache store.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.exceptions import InvalidEndpoint


class Endpoint(BaseModel):
    """
    Cache store endpoint

    Port is optional; None means "use the configured default port".
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1, description="Hostname or IPv4 address")
    port: int | None = Field(default=None, ge=1, le=65535, description="TCP port")

    @field_validator("host")
    @classmethod
    def host_has_no_whitespace(cls, v):
        if any(ch.isspace() for ch in v):
            raise ValueError("Host must not contain whitespace")
        return v

    @classmethod
    def parse(cls, endpoint: str) -> "Endpoint":
        """
        Parse ``host`` or ``host:port``

        Args:
            endpoint: Endpoint string

        Returns:
            Endpoint

        Raises:
            InvalidEndpoint: If the string is not host or host:port

        Example:
            >>> Endpoint.parse("cache-1:6380")
            Endpoint(host='cache-1', port=6380)
        """
        if not isinstance(endpoint, str) or not endpoint:
            raise InvalidEndpoint(f"Endpoint must be a non-empty string, got {endpoint!r}")

        host, sep, port = endpoint.partition(":")
        if sep and not (port.isascii() and port.isdigit()):
            raise InvalidEndpoint(
                f"Invalid port in endpoint {endpoint!r}", {"endpoint": endpoint}
            )

        try:
            return cls(host=host, port=int(port) if sep else None)
        except ValidationError as e:
            raise InvalidEndpoint(
                f"Invalid endpoint {endpoint!r}: {e.errors()[0]['msg']}", {"endpoint": endpoint}
            ) from e

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"
