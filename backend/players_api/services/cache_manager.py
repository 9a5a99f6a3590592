import logging
import threading
import time
from collections.abc import Callable
from typing import Any, NamedTuple

from cachetools import TLRUCache

from players_api.interfaces import CacheBackend

logger = logging.getLogger(__name__)

# Default TTLs in seconds
DEFAULT_TTL = 3600  # 1 hour
DEFAULT_MAX_SIZE = 1024


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _entry_expiry(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class CacheManager(CacheBackend):
    """In-process TTL cache with a per-entry time-to-live.

    Backed by ``cachetools.TLRUCache``: each entry carries its own TTL and is
    treated as absent once it has elapsed. When ``max_size`` is reached the
    least recently used entry is evicted.
    """

    def __init__(
        self,
        default_ttl: int = DEFAULT_TTL,
        max_size: int = DEFAULT_MAX_SIZE,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_size, ttu=_entry_expiry, timer=timer
        )
        # TLRUCache is not thread-safe.
        self._lock = threading.Lock()

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            logger.debug("Cache miss for '%s'", key)
            return None
        logger.debug("Cache hit for '%s'", key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        ttl_seconds = self._default_ttl if ttl is None else ttl
        with self._lock:
            self._cache[key] = _Entry(value, ttl_seconds)
        logger.debug("Cached '%s' (ttl=%ds)", key, ttl_seconds)

    async def flush_all(self) -> None:
        with self._lock:
            size = len(self._cache)
            self._cache.clear()
        logger.debug("Flushed %d cache entries", size)

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
