"""
Pytest configuration for integration tests

Integration tests talk to a real Redis. The endpoint comes from the
REDIS_TEST_ENDPOINT environment variable, falling back to cache.yaml
(localhost:6379). Tests are skipped when no server answers.
"""

import os
import uuid

import pytest

from config.settings import get_settings
from core.exceptions import StoreUnavailable
from factory.client_factory import create_cache_client


@pytest.fixture(scope="module")
def live_endpoint():
    return os.environ.get("REDIS_TEST_ENDPOINT", get_settings().redis_endpoint)


@pytest.fixture(scope="module")
def live_cache(live_endpoint):
    """RedisCacheClient against a running Redis"""
    client = create_cache_client(live_endpoint)
    try:
        client.ping()
    except StoreUnavailable as e:
        client.close()
        pytest.skip(f"Redis not reachable at {live_endpoint}: {e}")

    yield client
    client.close()


@pytest.fixture
def key_prefix(live_cache):
    """Unique key namespace per test, evicted afterwards"""
    prefix = f"itest:{uuid.uuid4().hex}"
    created = []

    def make(name: str) -> str:
        key = f"{prefix}:{name}"
        created.append(key)
        return key

    yield make
    for key in created:
        live_cache.evict(key)
