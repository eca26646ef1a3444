import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from shortlinker.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_redis_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis failures into DataStoreError

    Connectivity failures (ConnectionError, TimeoutError) name the Redis endpoint.
    Any other server-side failure (e.g. OOM, READONLY, NOSCRIPT) keeps the Redis
    message. DAO-level exceptions and programming errors propagate unchanged.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_error
        ... def find_by_shortcode(self, shortcode):
        ...     return self.redis.hgetall(shortcode)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            info = self.redis.connection_pool.connection_kwargs
            redis_host = info.get('host')
            redis_port = info.get('port')
            redis_db = info.get('db')
            raise DataStoreError(f"Can't connect to Redis at {redis_host}:{redis_port}/{redis_db}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis command failed: {e}') from e

    return wrapper
