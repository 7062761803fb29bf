"""In-process cache store with TTL support.

Reference CacheStore for tests and single-process deployments. Expiry is
enforced here, never by CacheService: lazily when a key is read, and on
every write for any deadline that has already passed.
"""

from __future__ import annotations

import copy
import heapq
import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Dict-backed cache store; supports key listing for prefix sweeps.

    Values are deep-copied on the way in and out so callers cannot
    mutate cached entries in place (matching a networked store, where
    every read is a fresh copy).
    """

    name = "memory"

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty store.

        Args:
            clock: Monotonic time source in seconds (injectable for tests).
        """
        self._clock = clock
        self._entries: dict[str, tuple[Any, float | None]] = {}
        # (expires_at, key); may hold stale pairs for overwritten or deleted keys
        self._deadlines: list[tuple[float, str]] = []

    def _is_expired(self, expires_at: float | None) -> bool:
        return expires_at is not None and self._clock() >= expires_at

    def _purge_if_expired(self, key: str) -> bool:
        """Drop key if its TTL has passed. Returns True if the key is gone."""
        entry = self._entries.get(key)
        if entry is None:
            return True
        if self._is_expired(entry[1]):
            del self._entries[key]
            logger.debug("Cache EXPIRE: %s", key)
            return True
        return False

    def _purge_due(self) -> None:
        """Drop every entry whose deadline has passed, keys never read again included."""
        now = self._clock()
        while self._deadlines and self._deadlines[0][0] <= now:
            expires_at, key = heapq.heappop(self._deadlines)
            entry = self._entries.get(key)
            if entry is not None and entry[1] == expires_at:
                del self._entries[key]
                logger.debug("Cache EXPIRE: %s", key)

    async def ping(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        """Return a copy of the cached value, or None if missing or expired."""
        if self._purge_if_expired(key):
            return None
        return copy.deepcopy(self._entries[key][0])

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store value; overwrites any existing entry (last write wins).

        Expired entries are swept before the write.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl_seconds: Seconds until expiry; None means never.
        """
        self._purge_due()
        expires_at = None if ttl_seconds is None else self._clock() + ttl_seconds
        self._entries[key] = (copy.deepcopy(value), expires_at)
        if expires_at is not None:
            heapq.heappush(self._deadlines, (expires_at, key))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def list_keys(self, prefix: str | None = None) -> list[str]:
        """Return live keys, optionally only those starting with prefix.

        Expired keys are purged on the way.
        """
        return [
            key
            for key in list(self._entries)
            if (prefix is None or key.startswith(prefix)) and not self._purge_if_expired(key)
        ]

    def expiry_of(self, key: str) -> float | None:
        """Return the absolute expiry deadline of key (None = no expiry).

        Raises:
            KeyError: If key is not stored.
        """
        return self._entries[key][1]
