"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic (SRP). The cache store's
connection lifecycle belongs here, not to CacheService.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from together_pray.core.config import get_settings
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.factory import create_store
from together_pray.infrastructure.cache.redis_store import RedisStore
from together_pray.shared.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: build the configured cache store, connect it (Redis) and
    publish a CacheService on app.state.cache. Shutdown: disconnect.
    """
    settings = get_settings()

    # ---- Startup ----
    store = create_store(settings)
    if isinstance(store, RedisStore):
        await store.connect()
    app.state.cache = CacheService(store)
    logger.info("Cache initialized (backend: %s)", store.name)

    yield

    # ---- Shutdown ----
    if isinstance(store, RedisStore):
        await store.disconnect()
    app.state.cache = None
    logger.info("Cache disconnected")
