"""Interfaces module - Abstract base classes for the cache layer"""

from .cache import BaseCacheClient
from .codec import BaseCodec

__all__ = [
    "BaseCacheClient",
    "BaseCodec",
]
