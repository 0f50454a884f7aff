"""
Redis implementation of the cache-aside client

Synchronous, pooled: every public operation borrows one connection from a
blocking pool and returns it on every exit path.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from redis import BlockingConnectionPool, ConnectionPool, Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from config.settings import Settings, get_settings
from core.codec import JsonCodec
from core.exceptions import (
    CacheError,
    DeserializationError,
    SerializationError,
    StoreCommandError,
    StoreUnavailable,
)
from core.interfaces.cache import BaseCacheClient
from core.interfaces.codec import BaseCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _validate_ttl(ttl: int | None) -> None:
    if ttl is not None and ttl < 0:
        raise ValueError(f"TTL must be >= 0 seconds, got {ttl}")


class RedisCacheClient(BaseCacheClient):
    """
    Redis implementation

    Features:
    - Scalar get-or-load with optional TTL (SET + EXPIRE)
    - Set get-or-load (SMEMBERS / SADD)
    - Bulk SREM/SADD across many keys in one pipelined round trip
    - Typed decoding through a pluggable codec (JSON by default)

    Not provided:
    - Single-flight loading: concurrent misses may each call their loader
    - Atomic read-load-write: composite operations can interleave
    """

    def __init__(
        self,
        pool: ConnectionPool,
        codec: BaseCodec | None = None,
        endpoint: str | None = None,
    ):
        """
        Initialize client over an existing pool

        Args:
            pool: redis-py connection pool (owned by this client)
            codec: Value codec (default JsonCodec)
            endpoint: Label used in logs and errors (default from pool kwargs)
        """
        self.pool = pool
        self.codec = codec or JsonCodec()
        if endpoint is None:
            kwargs = pool.connection_kwargs
            endpoint = f"{kwargs.get('host', 'localhost')}:{kwargs.get('port', 6379)}"
        self.endpoint = endpoint

    @classmethod
    def from_endpoint(
        cls, host: str, port: int | None = None, settings: Settings | None = None
    ) -> "RedisCacheClient":
        """
        Build a client with its own blocking pool

        Args:
            host: Redis host
            port: Redis port (default Settings.REDIS_PORT)
            settings: Settings override (default get_settings())

        Returns:
            RedisCacheClient
        """
        settings = settings or get_settings()
        port = port or settings.REDIS_PORT

        pool = BlockingConnectionPool(
            host=host,
            port=port,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            max_connections=settings.REDIS_MAX_CONNECTIONS,
            timeout=settings.REDIS_POOL_TIMEOUT,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.REDIS_SOCKET_CONNECT_TIMEOUT,
            decode_responses=True,
        )
        logger.info(
            f"✓ Created Redis pool for {host}:{port} "
            f"(db={settings.REDIS_DB}, max_connections={settings.REDIS_MAX_CONNECTIONS})"
        )
        return cls(
            pool,
            codec=JsonCodec(strict=settings.CACHE_STRICT_DECODING),
            endpoint=f"{host}:{port}",
        )

    # -------------------------------------------------------------------------
    # Connection handling
    # -------------------------------------------------------------------------

    def _store_error(self, op: str, key: str | None, error: RedisError) -> CacheError:
        details = {"endpoint": self.endpoint, "op": op}
        if key is not None:
            details["key"] = key
        if isinstance(error, (RedisConnectionError, RedisTimeoutError)):
            return StoreUnavailable(f"Redis {op} failed on {self.endpoint}: {error}", details)
        return StoreCommandError(f"Redis {op} rejected on {self.endpoint}: {error}", details)

    @contextmanager
    def _connection(self, op: str, key: str | None = None) -> Iterator[Redis]:
        """Borrow one pooled connection for the duration of the block"""
        try:
            client = Redis(connection_pool=self.pool, single_connection_client=True)
        except RedisError as e:
            logger.error(f"✗ Failed to acquire Redis connection ({self.endpoint}): {e}")
            raise StoreUnavailable(
                f"Cannot acquire connection to {self.endpoint}: {e}",
                {"endpoint": self.endpoint, "op": op},
            ) from e

        try:
            yield client
        except RedisError as e:
            logger.error(f"✗ Redis {op} error: {e}")
            raise self._store_error(op, key, e) from e
        finally:
            client.close()

    def _decode(self, key: str, raw: str | bytes, out: type[T]) -> T:
        try:
            return self.codec.deserialize(raw, out)
        except DeserializationError as e:
            e.details.setdefault("key", key)
            logger.error(f"✗ Cannot decode cached value for {key}: {e.message}")
            raise

    # -------------------------------------------------------------------------
    # Scalar keys
    # -------------------------------------------------------------------------

    def put(self, key: str, value: Any, ttl: int | None = None) -> None:
        """
        Store a value with optional TTL

        SET then EXPIRE on one connection, not a transaction: if EXPIRE fails
        the value stays cached without expiry. A TTL-less put clears any
        earlier TTL on the key (Redis SET semantics). ttl=0 expires the key
        immediately.

        Raises:
            ValueError: If ttl is negative
            SerializationError: If value cannot be encoded
            StoreUnavailable / StoreCommandError: On store failure
        """
        _validate_ttl(ttl)
        payload = self.codec.serialize(value)

        with self._connection("SET", key) as conn:
            conn.set(key, payload)
            if ttl is not None:
                conn.expire(key, ttl)

        logger.debug(f"Cache SET {key} (ttl={ttl})")

    def get(
        self, key: str, loader: Callable[[], T], out: type[T], ttl: int | None = None
    ) -> T:
        """
        Get cached value, loading and caching it on a miss

        A loader returning None is passed through without being cached.
        Loader exceptions propagate and nothing is written.

        Raises:
            DeserializationError: If the cached text does not decode to ``out``
        """
        _validate_ttl(ttl)

        with self._connection("GET", key) as conn:
            raw = conn.get(key)

        if raw is not None:
            logger.debug(f"Cache HIT {key}")
            return self._decode(key, raw, out)

        logger.debug(f"Cache MISS {key}")
        loaded = loader()
        if loaded is None:
            logger.debug(f"Loader returned None for {key}, not caching")
            return loaded

        self.put(key, loaded, ttl)
        return loaded

    def evict(self, key: str) -> None:
        with self._connection("DEL", key) as conn:
            removed = conn.delete(key)
        logger.debug(f"Cache EVICT {key} (removed={removed})")

    # -------------------------------------------------------------------------
    # Set keys
    # -------------------------------------------------------------------------

    def _serialize_members(self, key: str, values: Iterable[Any]) -> list[str]:
        members = []
        for value in values:
            try:
                hash(value)
            except TypeError as e:
                raise SerializationError(
                    f"Set member of type {type(value).__name__} for {key} is not hashable; "
                    f"use a frozen model (ConfigDict(frozen=True)) or a frozen dataclass",
                    {"key": key, "type": type(value).__name__},
                ) from e
            members.append(self.codec.serialize(value))
        return members

    def add_to_set(self, key: str, values: Iterable[Any]) -> None:
        """
        Add members to the set at key with a single SADD

        Members must be hashable so that get_members() can return them as a
        set. An empty ``values`` sends nothing.

        Raises:
            SerializationError: If a member is unhashable or cannot be encoded
        """
        members = self._serialize_members(key, values)
        if not members:
            logger.debug(f"Cache SADD {key} skipped (no members)")
            return

        with self._connection("SADD", key) as conn:
            added = conn.sadd(key, *members)

        logger.debug(f"Cache SADD {key} ({added}/{len(members)} new)")

    def get_members(
        self, key: str, loader: Callable[[], Iterable[T]], out: type[T]
    ) -> set[T]:
        """
        Get set members, loading and caching them when none are stored

        An empty set and a missing key look the same in Redis, so both reload.

        Raises:
            DeserializationError: If a cached member does not decode to a
                hashable ``out``
            SerializationError: If a loaded member is unhashable
        """
        with self._connection("SMEMBERS", key) as conn:
            raw_members = conn.smembers(key)

        if raw_members:
            logger.debug(f"Cache HIT {key} ({len(raw_members)} members)")
            decoded = [self._decode(key, raw, out) for raw in raw_members]
            try:
                return set(decoded)
            except TypeError as e:
                logger.error(f"✗ Cached members of {key} decode to unhashable {out!r}")
                raise DeserializationError(
                    f"Members of {key} decode to unhashable type {out!r}; "
                    f"use a frozen model (ConfigDict(frozen=True)) or a frozen dataclass",
                    {"key": key, "type": repr(out)},
                ) from e

        logger.debug(f"Cache MISS {key} (empty set)")
        loaded = list(loader())
        self.add_to_set(key, loaded)
        return set(loaded)

    def bulk_set_insert_and_delete(
        self,
        deletes: Mapping[str, Iterable[Any]],
        inserts: Mapping[str, Iterable[Any]],
    ) -> None:
        """
        Execute batch SREM and SADD operations in one pipeline

        All SREMs are queued before all SADDs, so a key present in both maps
        loses its stale members before gaining the new ones. The pipeline is
        not a transaction: on failure, whatever the store already executed
        stands and the whole batch is reported as failed.

        Args:
            deletes: key -> members to remove from the set at that key
            inserts: key -> members to add to the set at that key
        """
        removals = [(key, self._serialize_members(key, values)) for key, values in deletes.items()]
        additions = [(key, self._serialize_members(key, values)) for key, values in inserts.items()]
        removals = [(key, members) for key, members in removals if members]
        additions = [(key, members) for key, members in additions if members]

        if not removals and not additions:
            logger.debug("Bulk set mutation skipped (nothing to send)")
            return

        client = Redis(connection_pool=self.pool)
        try:
            with client.pipeline(transaction=False) as pipe:
                for key, members in removals:
                    pipe.srem(key, *members)
                for key, members in additions:
                    pipe.sadd(key, *members)
                pipe.execute()
        except RedisError as e:
            logger.error(f"✗ Redis pipeline error: {e}")
            raise self._store_error("PIPELINE", None, e) from e

        logger.debug(
            f"Bulk set mutation: {len(removals)} SREM, {len(additions)} SADD in one round trip"
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def ping(self) -> bool:
        """Check that the store answers PING"""
        with self._connection("PING") as conn:
            return bool(conn.ping())

    def close(self) -> None:
        """Disconnect all pooled connections"""
        self.pool.disconnect()
        logger.info(f"✓ Redis pool closed ({self.endpoint})")
