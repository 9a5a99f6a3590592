import asyncio

import pytest

from players_api.services.cache_manager import CacheManager


class TestCacheManager:
    @pytest.mark.asyncio
    async def test_get_missing_key_returns_none(self, cache: CacheManager) -> None:
        assert await cache.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, cache: CacheManager) -> None:
        await cache.set("all", ["a", "b"])
        assert await cache.get("all") == ["a", "b"]

    @pytest.mark.asyncio
    async def test_set_overwrites_existing(self, cache: CacheManager) -> None:
        await cache.set("player:1", "old")
        await cache.set("player:1", "new")
        assert await cache.get("player:1") == "new"

    @pytest.mark.asyncio
    async def test_entries_expire_on_their_own_ttl(self, cache: CacheManager, clock) -> None:
        await cache.set("short", 1, ttl=10)
        await cache.set("long", 2, ttl=100)

        clock.advance(50)

        assert await cache.get("short") is None
        assert await cache.get("long") == 2

    @pytest.mark.asyncio
    async def test_default_ttl_applies_when_none_given(self, clock) -> None:
        cache = CacheManager(default_ttl=5, timer=clock)
        await cache.set("player:1", "value")

        clock.advance(4)
        assert await cache.get("player:1") == "value"
        clock.advance(2)
        assert await cache.get("player:1") is None

    @pytest.mark.asyncio
    async def test_flush_all_removes_everything(self, cache: CacheManager) -> None:
        await cache.set("all", [])
        await cache.set("player:1", "one")
        await cache.set("player:squad:10", "ten")

        await cache.flush_all()

        assert await cache.get("all") is None
        assert await cache.get("player:1") is None
        assert await cache.get("player:squad:10") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_flush_all_is_idempotent(self, cache: CacheManager) -> None:
        await cache.set("player:1", "one")

        await cache.flush_all()
        await cache.flush_all()

        assert await cache.get("player:1") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_size_is_bounded(self, clock) -> None:
        cache = CacheManager(max_size=2, timer=clock)
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.set("c", 3)

        assert len(cache) == 2
        assert await cache.get("c") == 3

    @pytest.mark.asyncio
    async def test_concurrent_sets_and_flushes_leave_a_consistent_cache(
        self, cache: CacheManager
    ) -> None:
        keys = [f"player:{n}" for n in range(150)]
        calls = []
        for n, key in enumerate(keys):
            calls.append(cache.set(key, n))
            if n % 40 == 0:
                calls.append(cache.flush_all())

        await asyncio.gather(*calls)

        surviving = [key for key in keys if await cache.get(key) is not None]
        assert len(cache) == len(surviving)
        assert len(cache) <= 100

        await cache.flush_all()
        assert len(cache) == 0
