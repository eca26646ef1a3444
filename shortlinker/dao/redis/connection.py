"""Process-wide Redis connection lifecycle

A Lambda execution environment serves many invocations. Opening a new Redis
connection on every invocation wastes a TCP (and AUTH) round trip, so a single
client is opened on the first invocation (cold start), reused by every later
invocation, and closed when the interpreter shuts down.

Classes:
    RedisConnectionManager:
        Owns at most one Redis client per process.

Attributes:
    connections (RedisConnectionManager):
        The process-wide manager used by Lambda handlers.

Example:
    >>> from shortlinker.dao.redis import connections, UrlMappingRedisDAO
    >>> client = connections.connect(host='localhost', port=6379, db=0)
    >>> dao = UrlMappingRedisDAO(redis_client=client, prefix='shortlinker:local')
    >>> connections.connect(host='localhost', port=6379, db=0) is client
    True
"""

import atexit
import logging
import threading
from typing import Optional

import redis

from shortlinker.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


class RedisConnectionManager:
    """Open, reuse and close a single Redis client"""

    def __init__(self):
        self._client: Optional[redis.Redis] = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect(
        self,
        host: str = 'localhost',
        port: int = 6379,
        db: int = 0,
        decode_responses: bool = True,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> redis.Redis:
        """Return the shared Redis client, creating it on first use

        Connection parameters are only used when the client is created. A new
        client is pinged once; later calls return it unchanged, without any
        round trip.

        Returns:
            redis.Redis: The process-wide Redis client.

        Raises:
            DataStoreError:
                If the new client cannot reach Redis. No client is kept, so the
                next call retries.
        """
        with self._lock:
            if self._client is None:
                logger.debug('Opening Redis connection.', extra={'redisHost': host, 'redisPort': port, 'redisDb': db})
                client = redis.Redis(
                    host=host,
                    port=int(port),
                    db=int(db),
                    decode_responses=decode_responses,
                    username=username,
                    password=password,
                )
                try:
                    client.ping()
                except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
                    client.close()
                    raise DataStoreError(f"Can't connect to Redis at {host}:{port}/{db}.") from e
                self._client = client
            return self._client

    def close(self) -> None:
        """Close the shared Redis client (no-op if never opened)"""
        with self._lock:
            if self._client is not None:
                logger.debug('Closing Redis connection.')
                self._client.close()
                self._client = None


connections = RedisConnectionManager()
atexit.register(connections.close)
