"""Health check endpoints; used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from together_pray.api.v1.dependencies import get_cache
from together_pray.domain.exceptions import CacheBackendUnavailableError
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Cache backend unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    cache: Annotated[CacheService, Depends(get_cache)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 if the cache store answers a ping; 503 otherwise."""
    try:
        await cache.is_available()
    except CacheBackendUnavailableError as e:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    return ReadinessResponse(cache_backend=cache.store.name)
