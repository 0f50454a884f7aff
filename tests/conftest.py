"""
Pytest configuration for test suite

Markers:
- unit: Fast unit tests (no external dependencies)
- integration: Integration tests (requires a running Redis)
- slow: Slow-running tests (>10 seconds)
- tier2 / tier3: Integration tiers (infrastructure, end-to-end)
"""

import fakeredis
import pytest
import redis

from providers.opensource.redis_client import RedisCacheClient


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Fast unit tests (no dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (requires Redis)")
    config.addinivalue_line("markers", "slow: Slow tests (>10 seconds)")
    config.addinivalue_line("markers", "tier2: Infrastructure connectivity checks")
    config.addinivalue_line("markers", "tier3: End-to-end quality checks")


@pytest.fixture
def fake_server():
    """In-process Redis server shared by all connections of one test"""
    return fakeredis.FakeServer()


@pytest.fixture
def fake_pool(fake_server):
    """Connection pool whose connections talk to the fake server"""
    pool = redis.ConnectionPool(
        connection_class=fakeredis.FakeRedisConnection,
        server=fake_server,
        decode_responses=True,
    )
    yield pool
    pool.disconnect()


@pytest.fixture
def cache(fake_pool):
    """RedisCacheClient over the fake server"""
    return RedisCacheClient(fake_pool, endpoint="fake:6379")


@pytest.fixture
def raw_redis(fake_pool):
    """Plain redis client for inspecting store state"""
    client = redis.Redis(connection_pool=fake_pool)
    yield client
    client.close()
