import logging
from typing import Any

from players_api.interfaces import CacheBackend, PlayerStorage
from players_api.schemas.players import PlayerSchema
from players_api.services.cache_manager import DEFAULT_TTL

logger = logging.getLogger(__name__)

ALL_PLAYERS_KEY = "all"


def player_key(player_id: int) -> str:
    return f"player:{player_id}"


def squad_number_key(squad_number: int) -> str:
    return f"player:squad:{squad_number}"


class PlayerService:
    """Read-through cache in front of the player storage.

    Reads are served from the cache when possible and cached on a miss; a
    ``None`` lookup result is never cached. Every write goes straight to
    storage and then flushes the whole cache, because one player can sit
    behind several keys (by id, by squad number, and the full listing).

    Storage errors propagate unchanged. Cache errors are logged and treated as
    misses so the cache can never fail a request.
    """

    def __init__(
        self,
        storage: PlayerStorage,
        cache: CacheBackend,
        ttl: int = DEFAULT_TTL,
    ) -> None:
        self.storage = storage
        self.cache = cache
        self.ttl = ttl

    async def retrieve_all(self) -> list[PlayerSchema]:
        players = await self._cache_get(ALL_PLAYERS_KEY)
        if players is None:
            players = await self.storage.select_all()
            await self._cache_set(ALL_PLAYERS_KEY, players)
        return list(players)

    async def retrieve_by_id(self, player_id: int) -> PlayerSchema | None:
        key = player_key(player_id)
        player = await self._cache_get(key)
        if player is None:
            player = await self.storage.select_by_id(player_id)
            if player is not None:
                await self._cache_set(key, player)
        return player

    async def retrieve_by_squad_number(self, squad_number: int) -> PlayerSchema | None:
        key = squad_number_key(squad_number)
        player = await self._cache_get(key)
        if player is None:
            player = await self.storage.select_by_squad_number(squad_number)
            if player is not None:
                await self._cache_set(key, player)
        return player

    async def create(self, player: PlayerSchema) -> PlayerSchema:
        stored = await self.storage.insert(player)
        await self._flush()
        return stored

    async def update(self, player: PlayerSchema) -> None:
        await self.storage.update(player)
        await self._flush()

    async def delete(self, player_id: int) -> None:
        await self.storage.delete(player_id)
        await self._flush()

    async def _cache_get(self, key: str) -> Any | None:
        try:
            return await self.cache.get(key)
        except Exception:
            logger.warning("Cache read failed for '%s', falling back to storage", key, exc_info=True)
            return None

    async def _cache_set(self, key: str, value: Any) -> None:
        try:
            await self.cache.set(key, value, self.ttl)
        except Exception:
            logger.warning("Cache write failed for '%s'", key, exc_info=True)

    async def _flush(self) -> None:
        try:
            await self.cache.flush_all()
        except Exception:
            logger.warning("Cache flush failed", exc_info=True)
