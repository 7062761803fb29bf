"""Read-through cache coordinator.

CacheService sits between domain services and a CacheStore: it builds
keys, serves read-through lookups (get_or_set), and invalidates entries
by entity or by prefix. It holds no state besides the store reference,
so one instance is shared by all concurrent requests.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from together_pray.domain.enums import CachePrefix
from together_pray.domain.exceptions import CacheInvalidationError, ValidationException
from together_pray.infrastructure.cache.cache_protocol import CacheStore, KeyListingStore
from together_pray.infrastructure.cache.keys import build_key, prefix_pattern

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _validate_ttl(ttl: int | None) -> None:
    """Raise ValidationException unless ttl is None or a positive int."""
    if ttl is None:
        return
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
        raise ValidationException(
            f"Cache TTL must be a positive number of seconds or None, got {ttl!r}",
            field="ttl",
        )


class CacheService:
    """Read-through cache over an injected CacheStore.

    No retries, no fallbacks: store and loader errors propagate to the
    caller. Concurrent misses on one key may each run the loader (no
    single-flight); the last write wins.
    """

    def __init__(self, store: CacheStore) -> None:
        """Initialize with the store that owns all cached data.

        Args:
            store: Backend implementing CacheStore (optionally KeyListingStore).
        """
        self.store = store

    @staticmethod
    def build_key(prefix: CachePrefix | str, *parts: str) -> str:
        """Return ``prefix:part1:...`` (see keys.build_key)."""
        return build_key(prefix, *parts)

    async def is_available(self) -> bool:
        """Return True if the store answers a ping.

        Raises:
            CacheBackendUnavailableError: If the store cannot be reached.
        """
        return await self.store.ping()

    async def get(self, key: str) -> Any | None:
        """Return cached value or None on a miss."""
        value = await self.store.get(key)
        logger.debug("Cache %s: %s", "MISS" if value is None else "HIT", key)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value under key.

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable for networked stores).
            ttl: Time-to-live in seconds; None means no expiry.

        Raises:
            ValidationException: If ttl is not None or a positive int.
        """
        _validate_ttl(ttl)
        await self.store.set(key, value, ttl)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        """Remove key; a missing key is not an error."""
        await self.store.delete(key)
        logger.debug("Cache DELETE: %s", key)

    async def get_or_set(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        ttl: int | None = None,
    ) -> T:
        """Return the cached value for key, loading and storing it on a miss.

        Any stored value other than None is a hit, including 0, "" and
        False. A loader result of None is returned but not written, since
        it would read back as a miss. If loader raises, the error
        propagates and nothing is cached.

        Args:
            key: Cache key.
            loader: Async callable producing the fresh value.
            ttl: Time-to-live in seconds for a freshly loaded value.

        Returns:
            Cached or freshly loaded value.
        """
        _validate_ttl(ttl)
        cached = await self.get(key)
        if cached is not None:
            return cached
        value = await loader()
        if value is not None:
            await self.set(key, value, ttl)
        return value

    async def invalidate(self, prefix: CachePrefix | str, *parts: str) -> None:
        """Delete the single entry at build_key(prefix, *parts)."""
        await self.delete(build_key(prefix, *parts))

    async def invalidate_group(self, group_id: str) -> None:
        await self.invalidate(CachePrefix.GROUP, group_id)

    async def invalidate_user(self, user_id: str) -> None:
        await self.invalidate(CachePrefix.USER, user_id)

    async def invalidate_membership(self, user_id: str, group_id: str) -> None:
        """Delete the membership entry for (user, group)."""
        await self.invalidate(CachePrefix.MEMBERSHIP, user_id, group_id)

    async def invalidate_prayer_stats(self, group_id: str) -> None:
        await self.invalidate(CachePrefix.PRAYER_STATS, group_id)

    async def invalidate_by_prefix(self, prefix: CachePrefix | str) -> int:
        """Best-effort delete of every key under prefix.

        Deletions run concurrently and all are awaited. Stores that
        cannot list keys make this a logged no-op, so callers must not
        rely on it for correctness-critical invalidation.

        Args:
            prefix: Category whose keys to drop (e.g. CachePrefix.GROUP).

        Returns:
            Number of keys deleted.

        Raises:
            CacheInvalidationError: If any deletion failed (lists every failed key).
        """
        pattern = prefix_pattern(prefix)
        if not isinstance(self.store, KeyListingStore):
            logger.warning(
                "Cache store %s cannot list keys; skipping invalidation of %s*",
                self.store.name,
                pattern,
            )
            return 0

        keys = [key for key in await self.store.list_keys(pattern) if key.startswith(pattern)]
        results = await asyncio.gather(
            *(self.store.delete(key) for key in keys),
            return_exceptions=True,
        )
        failures = {
            key: result
            for key, result in zip(keys, results)
            if isinstance(result, BaseException)
        }
        deleted = len(keys) - len(failures)
        if deleted:
            logger.info("Cache INVALIDATE: %s* (%s keys)", pattern, deleted)
        if failures:
            raise CacheInvalidationError(CachePrefix(prefix).value, failures)
        return deleted
