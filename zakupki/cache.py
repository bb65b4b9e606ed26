"""Key-value cache backed by Redis."""

import functools

import redis

__all__ = ["RedisCache", "get_redis_client"]

REDIS_HOST = "localhost"
REDIS_PORT = 6379
REDIS_DB = 0


@functools.lru_cache(maxsize=None)
def get_redis_client():
    """Return the shared Redis client, creating it on first use."""
    return redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB, decode_responses=True)


class RedisCache:
    """String values stored under string keys, without expiry."""

    def __init__(self, client=None):
        self._client = get_redis_client() if client is None else client

    def save(self, key, value):
        """Store ``value`` under ``key``."""
        self._client.set(key, value)

    def get(self, key):
        """Return the value under ``key``; raise KeyError if there is none."""
        value = self._client.get(key)
        if value is None:
            raise KeyError(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value