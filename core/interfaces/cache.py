from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


class BaseCacheClient(ABC):
    """
    Abstract interface for the cache-aside layer

    Implementations:
    - RedisCacheClient (pooled, synchronous)

    Composite operations (get-then-load-then-put) are not atomic. Concurrent
    misses on the same key may each run their loader; last writer wins.
    """

    @abstractmethod
    def put(self, key: str, value: Any, ttl: int | None = None) -> None:
        """
        Store a value with optional TTL

        Args:
            key: Cache key
            value: Value to serialize and store
            ttl: TTL in seconds; None leaves the key without expiry
        """

    @abstractmethod
    def get(self, key: str, loader: Callable[[], T], out: type[T], ttl: int | None = None) -> T:
        """
        Get cached value, loading and caching it on a miss

        Args:
            key: Cache key
            loader: Supplies the value when it is not cached
            out: Type of the cached or loaded value
            ttl: TTL in seconds applied when the loaded value is stored

        Returns:
            Cached or loaded value
        """

    @abstractmethod
    def evict(self, key: str) -> None:
        """Remove the key (no-op when absent)"""

    @abstractmethod
    def add_to_set(self, key: str, values: Iterable[Any]) -> None:
        """
        Add members to the set stored at key

        Args:
            key: Key that holds the set
            values: Members to add
        """

    @abstractmethod
    def get_members(
        self, key: str, loader: Callable[[], Iterable[T]], out: type[T]
    ) -> set[T]:
        """
        Get set members, loading and caching them when the set is empty

        Args:
            key: Key that holds the set
            loader: Supplies the members when none are cached
            out: Type of each member

        Returns:
            Cached or loaded members
        """

    @abstractmethod
    def bulk_set_insert_and_delete(
        self,
        deletes: Mapping[str, Iterable[Any]],
        inserts: Mapping[str, Iterable[Any]],
    ) -> None:
        """
        Remove and add set members across many keys in one round trip

        Args:
            deletes: key -> members to remove from the set at that key
            inserts: key -> members to add to the set at that key
        """

    @abstractmethod
    def ping(self) -> bool:
        """Check that the store answers"""

    @abstractmethod
    def close(self) -> None:
        """Close pooled connections"""
