from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix() -> str:
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def connection_kwargs() -> dict:
    return {'host': '203.0.113.1', 'port': 18000, 'db': 5}


@pytest.fixture
def redis_client(connection_kwargs) -> redis.Redis:
    """Mock a Redis pipeline-compatible client."""
    client = MagicMock(spec=redis.client.Pipeline)
    client.connection_pool = MagicMock(spec=redis.ConnectionPool, connection_kwargs=connection_kwargs)
    client.exists.return_value = False
    client.pipeline.return_value = client
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    client.get.return_value = None
    client.hgetall.return_value = {}
    return client
