"""Redis-backed cache store.

Async Redis store with TTL support. Values are JSON-encoded; TTLs are
sent to Redis in milliseconds (PX). Connection and timeout failures
raise CacheBackendUnavailableError; this layer does not reconnect or
retry. Call connect() at startup and disconnect() at shutdown.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from together_pray.core.config import Settings, get_settings
from together_pray.domain.exceptions import CacheBackendUnavailableError

logger = logging.getLogger(__name__)

# Keys fetched per SCAN round-trip in list_keys
SCAN_BATCH_SIZE = 500


class RedisStore:
    """Cache store on redis.asyncio; supports key listing via SCAN."""

    name = "redis"

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Connection settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()

    async def connect(self) -> None:
        """Create the Redis client and ping it. Call on app startup.

        A failed ping is logged and leaves the store disconnected; later
        operations then raise CacheBackendUnavailableError.
        """
        if self.redis is not None:
            return
        password = self.settings.redis_password
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=self.settings.redis_socket_timeout,
            socket_timeout=self.settings.redis_socket_timeout,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache unavailable.", e)
            await client.aclose()
            return
        self.redis = client
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Redis cache disconnected")

    def _client(self, operation: str) -> redis.Redis:
        if self.redis is None:
            raise CacheBackendUnavailableError(operation, self.name, "not connected")
        return self.redis

    def _unavailable(self, operation: str, error: Exception) -> CacheBackendUnavailableError:
        logger.warning("Cache %s failed (Redis unreachable): %s", operation, error)
        return CacheBackendUnavailableError(operation, self.name, str(error))

    async def ping(self) -> bool:
        client = self._client("ping")
        try:
            return bool(await client.ping())
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise self._unavailable("ping", e) from e

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-decoded) or None on a miss.

        Args:
            key: Cache key (use together_pray.infrastructure.cache.keys builders).

        Raises:
            CacheBackendUnavailableError: If Redis cannot be reached.
        """
        client = self._client("get")
        try:
            value = await client.get(key)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise self._unavailable("get", e) from e
        if value is None:
            return None
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store value, expiring after ttl_seconds (sent to Redis as PX milliseconds).

        Args:
            key: Cache key.
            value: JSON-serializable value.
            ttl_seconds: Time-to-live in seconds; None means no expiry.

        Raises:
            CacheBackendUnavailableError: If Redis cannot be reached.
        """
        client = self._client("set")
        serialized = json.dumps(value)
        try:
            if ttl_seconds is None:
                await client.set(key, serialized)
            else:
                await client.set(key, serialized, px=ttl_seconds * 1000)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise self._unavailable("set", e) from e

    async def delete(self, key: str) -> None:
        client = self._client("delete")
        try:
            await client.delete(key)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise self._unavailable("delete", e) from e

    async def list_keys(self, prefix: str | None = None) -> list[str]:
        """Return keys using SCAN (non-blocking, unlike KEYS).

        Args:
            prefix: When given, Redis matches keys against "{prefix}*"
                server-side so only that category crosses the wire.

        Raises:
            CacheBackendUnavailableError: If Redis cannot be reached.
        """
        client = self._client("list_keys")
        try:
            match = None if prefix is None else f"{prefix}*"
            return [key async for key in client.scan_iter(match=match, count=SCAN_BATCH_SIZE)]
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise self._unavailable("list_keys", e) from e
