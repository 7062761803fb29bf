"""Cache store factory: returns the store configured by CACHE_BACKEND."""

from __future__ import annotations

from together_pray.core.config import Settings
from together_pray.infrastructure.cache.cache_protocol import CacheStore
from together_pray.infrastructure.cache.memory_store import InMemoryStore
from together_pray.infrastructure.cache.redis_store import RedisStore


def create_store(settings: Settings) -> CacheStore:
    """Build the cache store for settings.cache_backend.

    Redis stores are returned unconnected; the application lifespan owns
    connect()/disconnect().

    Raises:
        ValueError: If cache_backend is not 'memory' or 'redis'.
    """
    if settings.cache_backend == "memory":
        return InMemoryStore()
    if settings.cache_backend == "redis":
        return RedisStore(settings=settings)
    raise ValueError(
        f"Invalid cache_backend '{settings.cache_backend}'. Must be one of: 'memory', 'redis'"
    )
