"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and cache
exceptions to HTTP responses (SRP, OCP for adding new handlers).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from together_pray.core.config import get_settings
from together_pray.domain.exceptions import TogetherPrayException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "PERMISSION_DENIED": 403,
    "ALREADY_MEMBER": 409,
    "VALIDATION_ERROR": 400,
    "CACHE_UNAVAILABLE": 503,
    "CACHE_INVALIDATION_ERROR": 503,
}


def status_for(exc: TogetherPrayException) -> int:
    """Return the HTTP status for a domain exception (400 when unmapped)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def _together_pray_exception_handler(
    request: Request, exc: TogetherPrayException
) -> JSONResponse:
    """Return JSON from TogetherPrayException.to_dict() with appropriate status code."""
    status = status_for(exc)
    if status >= 500:
        logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain and generic exception handlers on app."""
    app.add_exception_handler(TogetherPrayException, _together_pray_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
