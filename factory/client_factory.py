"""
Client factory - Create cache clients from endpoints and configuration

Dependency injection pattern: callers depend on BaseCacheClient, the factory
decides the implementation.
"""

import logging

from config.settings import get_settings
from core.interfaces.cache import BaseCacheClient
from core.models.endpoint import Endpoint

logger = logging.getLogger(__name__)


def create_cache_client(endpoint: Endpoint | str | None = None) -> BaseCacheClient:
    """
    Create cache client for an endpoint

    Currently always returns RedisCacheClient

    Args:
        endpoint: Endpoint or ``host[:port]`` string (default Settings.redis_endpoint)

    Returns:
        BaseCacheClient: Redis client with its own connection pool

    Raises:
        InvalidEndpoint: If the endpoint string is malformed

    Examples:
        >>> client = create_cache_client("cache-1:6380")
        >>> client = create_cache_client()  # cache.yaml host:port
    """
    from providers.opensource.redis_client import RedisCacheClient

    settings = get_settings()
    if endpoint is None:
        endpoint = settings.redis_endpoint
    if isinstance(endpoint, str):
        endpoint = Endpoint.parse(endpoint)

    logger.info(f"Creating RedisCacheClient for {endpoint}")
    return RedisCacheClient.from_endpoint(endpoint.host, endpoint.port, settings)
