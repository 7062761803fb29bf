"""FastAPI dependencies: cache coordinator from app.state."""

from fastapi import Request

from together_pray.domain.exceptions import CacheBackendUnavailableError
from together_pray.infrastructure.cache.cache_service import CacheService


def get_cache(request: Request) -> CacheService:
    """Return the CacheService created by the lifespan.

    Raises:
        CacheBackendUnavailableError: If the lifespan has not set up a cache.
    """
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise CacheBackendUnavailableError("lookup", "none", "cache not initialized")
    return cache
