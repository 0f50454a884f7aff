"""
Cache client registry - one client per endpoint string

The registry is an ordinary object: the application builds one and passes it
to whatever needs cache access. ``get_registry()`` exposes a process-wide
default for callers that prefer a global accessor.
"""

import logging
import threading
from collections.abc import Callable

from core.interfaces.cache import BaseCacheClient
from core.models.endpoint import Endpoint
from factory.client_factory import create_cache_client

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Endpoint], BaseCacheClient]


class CacheClientRegistry:
    """
    Endpoint-keyed cache client registry

    Invariants:
    - Same endpoint string → same client, constructed at most once even under
      concurrent first access
    - Distinct strings → distinct clients ("h" and "h:6379" are not merged)
    - Clients are kept for the registry's lifetime
    """

    def __init__(self, client_factory: ClientFactory | None = None):
        """
        Initialize registry

        Args:
            client_factory: Builds a client for a parsed endpoint
                (default factory.client_factory.create_cache_client)
        """
        self._client_factory = client_factory or create_cache_client
        self._instances: dict[str, BaseCacheClient] = {}
        self._lock = threading.Lock()

    def get_instance(self, endpoint: str) -> BaseCacheClient:
        """
        Get the client dedicated to ``endpoint``

        Args:
            endpoint: ``host`` or ``host:port``

        Returns:
            BaseCacheClient for that exact endpoint string

        Raises:
            InvalidEndpoint: If the endpoint string is malformed
        """
        with self._lock:
            client = self._instances.get(endpoint)
            if client is None:
                parsed = Endpoint.parse(endpoint)
                client = self._client_factory(parsed)
                self._instances[endpoint] = client
                logger.info(f"✓ Registered cache client for {endpoint}")
            return client

    def endpoints(self) -> list[str]:
        """Endpoint strings with a registered client"""
        with self._lock:
            return list(self._instances)

    def __contains__(self, endpoint: str) -> bool:
        with self._lock:
            return endpoint in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


# Process-wide default
_registry_instance: CacheClientRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> CacheClientRegistry:
    """
    Get the process-wide registry (singleton)

    Returns:
        CacheClientRegistry instance
    """
    global _registry_instance
    with _registry_lock:
        if _registry_instance is None:
            _registry_instance = CacheClientRegistry()
        return _registry_instance


def get_instance(endpoint: str) -> BaseCacheClient:
    """
    Get the client for ``endpoint`` from the process-wide registry

    Example:
        >>> cache = get_instance("localhost:6379")
        >>> cache is get_instance("localhost:6379")
        True
    """
    return get_registry().get_instance(endpoint)
