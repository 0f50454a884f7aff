"""Factory package - Dependency injection for cache clients"""

from .client_factory import create_cache_client
from .registry import CacheClientRegistry, get_instance, get_registry

__all__ = [
    "create_cache_client",
    "CacheClientRegistry",
    "get_registry",
    "get_instance",
]
