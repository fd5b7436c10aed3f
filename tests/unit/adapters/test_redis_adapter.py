import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from ticketing_api.shared.adapters.redis_adapter import CacheStatus, RedisCache


class StubRedis:
    """Minimal async client double."""

    def __init__(self, fail: bool = False) -> None:
        self.data: dict[str, str] = {}
        self.expiries: dict[str, int] = {}
        self.fail = fail

    def _check(self) -> None:
        if self.fail:
            raise RedisConnectionError("connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self._check()
        self.data[key] = value
        self.expiries[key] = ex
        return True

    async def delete(self, key):
        self._check()
        return 1 if self.data.pop(key, None) is not None else 0

    async def ping(self):
        self._check()
        return True


def _cache(client: StubRedis, enabled: bool = True) -> RedisCache:
    cache = RedisCache(url="redis://unused:6379/0", default_ttl=300, enabled=enabled)
    cache._client = client
    return cache


@pytest.mark.unit
class TestRedisCache:

    async def test_miss_then_hit(self):
        cache = _cache(StubRedis())

        first = await cache.get("venue:get:1")
        await cache.set("venue:get:1", '{"id": 1}')
        second = await cache.get("venue:get:1")

        assert first.status is CacheStatus.MISS
        assert second.hit
        assert second.value == '{"id": 1}'

    async def test_set_uses_default_ttl(self):
        client = StubRedis()

        await _cache(client).set("k", "v")

        assert client.expiries["k"] == 300

    async def test_set_with_explicit_ttl(self):
        client = StubRedis()

        await _cache(client).set("k", "v", ttl=60)

        assert client.expiries["k"] == 60

    async def test_errors_are_reported_not_raised(self):
        cache = _cache(StubRedis(fail=True))

        lookup = await cache.get("k")

        assert lookup.status is CacheStatus.ERROR
        assert lookup.value is None
        assert await cache.set("k", "v") is False
        assert await cache.delete("k") is False
        assert await cache.ping() is False

    async def test_disabled_cache_never_touches_redis(self):
        client = StubRedis(fail=True)
        cache = _cache(client, enabled=False)

        assert (await cache.get("k")).status is CacheStatus.MISS
        assert await cache.set("k", "v") is False

    async def test_delete(self):
        client = StubRedis()
        cache = _cache(client)
        await cache.set("k", "v")

        assert await cache.delete("k") is True
        assert await cache.delete("k") is False
