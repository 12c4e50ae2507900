import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from shortcutter.dao.exceptions import DataStoreError


__all__ = ['handle_redis_connection_error', 'describe_connection']

F = TypeVar('F', bound=Callable[..., Any])


def describe_connection(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for a Redis client's connection pool"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods so every Redis failure surfaces as DataStoreError

    Connectivity issues (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)
    are reported as "Can't connect". Any other redis.exceptions.RedisError raised by the
    server (WRONGTYPE, READONLY, OOM, ...) carries the server's message.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def get_target(self, key):
        ...     return self.redis.get(key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {describe_connection(self.redis)} failed: {e}') from e

    return wrapper
