import pytest

from zakupki.cache import RedisCache, get_redis_client


class FakeRedis:
    def __init__(self, encode=False):
        self.data = {}
        self.encode = encode

    def set(self, key, value):
        self.data[key] = value.encode("utf-8") if self.encode else value
        return True

    def get(self, key):
        return self.data.get(key)


def test_save_then_get():
    cache = RedisCache(FakeRedis())
    cache.save("notice", "value")
    assert cache.get("notice") == "value"


def test_save_overwrites():
    cache = RedisCache(FakeRedis())
    cache.save("k", "first")
    cache.save("k", "second")
    assert cache.get("k") == "second"


def test_missing_key_raises():
    cache = RedisCache(FakeRedis())
    with pytest.raises(KeyError):
        cache.get("absent")


def test_bytes_are_decoded():
    cache = RedisCache(FakeRedis(encode=True))
    cache.save("k", "Ноутбук")
    assert cache.get("k") == "Ноутбук"


def test_redis_client_targets_local_server():
    settings = get_redis_client().connection_pool.connection_kwargs
    assert settings["host"] == "localhost"
    assert settings["port"] == 6379
    assert settings["db"] == 0