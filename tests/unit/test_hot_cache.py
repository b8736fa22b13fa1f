"""Unit tests for the hot cache implementations."""

import json

import pytest

from src.infrastructure.cache import HotCacheManager, InMemoryHotCache, RedisHotCache


class ManualClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class FakeRedisClient:
    """Records the redis.asyncio calls RedisHotCache makes."""

    def __init__(self):
        self.store = {}
        self.expiries = {}
        self.closed = False

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value
        self.expiries[key] = ex

    async def delete(self, key):
        self.store.pop(key, None)

    async def aclose(self):
        self.closed = True


class TestInMemoryHotCache:
    """Tests for the in-process cache."""

    @pytest.mark.asyncio
    async def test_entry_served_until_ttl(self):
        clock = ManualClock()
        cache = InMemoryHotCache(clock=clock)

        await cache.set("reputation:G1", {"score": 80}, ttl_seconds=300)
        clock.now += 299

        assert await cache.get("reputation:G1") == {"score": 80}

    @pytest.mark.asyncio
    async def test_entry_expires_at_ttl(self):
        clock = ManualClock()
        cache = InMemoryHotCache(clock=clock)

        await cache.set("reputation:G1", {"score": 80}, ttl_seconds=300)
        clock.now += 300

        assert await cache.get("reputation:G1") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_set_overwrites_and_resets_ttl(self):
        clock = ManualClock()
        cache = InMemoryHotCache(clock=clock)

        await cache.set("k", {"score": 1}, ttl_seconds=10)
        clock.now += 8
        await cache.set("k", {"score": 2}, ttl_seconds=10)
        clock.now += 8

        assert await cache.get("k") == {"score": 2}

    @pytest.mark.asyncio
    async def test_delete_missing_key_is_noop(self):
        cache = InMemoryHotCache()

        await cache.delete("absent")

        assert await cache.get("absent") is None


class TestRedisHotCache:
    """Tests for the Redis-backed cache against a fake client."""

    @pytest.mark.asyncio
    async def test_set_stores_json_with_expiry(self):
        client = FakeRedisClient()
        cache = RedisHotCache(client)

        await cache.set("reputation:G1", {"score": 80, "tier": "silver"}, ttl_seconds=300)

        assert json.loads(client.store["reputation:G1"]) == {"score": 80, "tier": "silver"}
        assert client.expiries["reputation:G1"] == 300

    @pytest.mark.asyncio
    async def test_get_decodes_json(self):
        client = FakeRedisClient()
        client.store["k"] = json.dumps({"score": 12})
        cache = RedisHotCache(client)

        assert await cache.get("k") == {"score": 12}
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        client = FakeRedisClient()
        cache = RedisHotCache(client)

        await cache.delete("k")
        await cache.close()

        assert client.closed is True


class TestHotCacheManager:
    """Tests for backend selection."""

    @pytest.mark.asyncio
    async def test_empty_url_uses_memory_cache(self):
        manager = HotCacheManager()
        manager.init(redis_url="")

        assert isinstance(manager.cache, InMemoryHotCache)
        assert manager.backend == "memory"

        await manager.close()
