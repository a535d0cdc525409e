"""
Shared pytest fixtures for redisesh tests.

This module provides common fixtures including:
- Redis mocks for call assertions
- An in-memory Redis fake that honours hash fields and TTLs
- A live Redis client for integration tests
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# Redis Mocking Infrastructure
# =============================================================================


@pytest.fixture
def mock_redis():
    """Create a mock Redis client with the session store commands."""
    redis = MagicMock()

    redis.hsetnx = MagicMock(return_value=True)
    redis.hexists = MagicMock(return_value=False)
    redis.hget = MagicMock(return_value=None)
    redis.hdel = MagicMock(return_value=0)
    redis.expire = MagicMock(return_value=True)
    redis.ttl = MagicMock(return_value=-2)
    redis.close = MagicMock()

    return redis


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_redis(fake_clock):
    """
    Redis fake with in-memory hash storage for more realistic tests.

    Keys carry an optional deadline; a key whose deadline has passed on
    fake_clock behaves as if Redis evicted it.
    """
    hashes = {}
    deadlines = {}

    def evict(name):
        deadline = deadlines.get(name)
        if deadline is not None and fake_clock.now >= deadline:
            hashes.pop(name, None)
            deadlines.pop(name, None)

    def hsetnx(name, key, value):
        evict(name)
        fields = hashes.setdefault(name, {})
        if key in fields:
            return False
        fields[key] = str(value)
        return True

    def hexists(name, key):
        evict(name)
        return key in hashes.get(name, {})

    def hget(name, key):
        evict(name)
        return hashes.get(name, {}).get(key)

    def hdel(name, *keys):
        evict(name)
        fields = hashes.get(name, {})
        removed = 0
        for key in keys:
            if key in fields:
                del fields[key]
                removed += 1
        if name in hashes and not fields:
            # Redis drops a hash together with its TTL once it is empty
            del hashes[name]
            deadlines.pop(name, None)
        return removed

    def expire(name, time):
        evict(name)
        if name not in hashes:
            return False
        deadlines[name] = fake_clock.now + time
        return True

    def ttl(name):
        evict(name)
        if name not in hashes:
            return -2
        if name not in deadlines:
            return -1
        return int(deadlines[name] - fake_clock.now)

    redis = MagicMock()
    redis.hsetnx = MagicMock(side_effect=hsetnx)
    redis.hexists = MagicMock(side_effect=hexists)
    redis.hget = MagicMock(side_effect=hget)
    redis.hdel = MagicMock(side_effect=hdel)
    redis.expire = MagicMock(side_effect=expire)
    redis.ttl = MagicMock(side_effect=ttl)
    redis.close = MagicMock()
    redis._hashes = hashes  # Expose for test assertions
    redis._deadlines = deadlines

    return redis


# =============================================================================
# Live Redis
# =============================================================================


@pytest.fixture
def redis_url():
    return os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0")


@pytest.fixture
def live_redis(redis_url):
    """Redis client for integration tests; skips the test if Redis is down."""
    import redis

    client = redis.Redis.from_url(redis_url, decode_responses=True, socket_connect_timeout=1)
    try:
        client.ping()
    except redis.exceptions.RedisError as e:
        client.close()
        pytest.skip(f"Redis not available at {redis_url}: {e}")

    yield client
    client.close()


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring a running Redis"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
