"""Contracts between the player service and its collaborators.

The service only talks to these abstractions, so the SQLite adapter or the
in-process cache can be replaced (or mocked in tests) without touching it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from players_api.schemas.players import PlayerSchema


class PlayerStorage(ABC):
    """Durable CRUD for players. Lookups return ``None`` when nothing matches."""

    @abstractmethod
    async def select_all(self) -> list[PlayerSchema]: ...

    @abstractmethod
    async def select_by_id(self, player_id: int) -> PlayerSchema | None: ...

    @abstractmethod
    async def select_by_squad_number(self, squad_number: int) -> PlayerSchema | None: ...

    @abstractmethod
    async def insert(self, player: PlayerSchema) -> PlayerSchema:
        """Persist a new player and return it as stored.

        Raises ``ConstraintViolation`` if the id or squad number is taken.
        """

    @abstractmethod
    async def update(self, player: PlayerSchema) -> None:
        """Replace every field of the row matching ``player.id``; no-op if absent."""

    @abstractmethod
    async def delete(self, player_id: int) -> None:
        """Remove the row matching ``player_id``; no-op if absent."""


class CacheBackend(ABC):
    """Key-value cache with per-entry time-to-live.

    All operations are async so a network-backed store could implement it
    without blocking the event loop.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value under *key*, or ``None`` if missing or expired."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* under *key* for *ttl* seconds (backend default when ``None``)."""

    @abstractmethod
    async def flush_all(self) -> None:
        """Remove every entry regardless of key or TTL."""
