"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, routers. No business
logic here (SRP). See together_pray.core.lifespan and
together_pray.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from together_pray.api.v1 import api_router
from together_pray.core.config import get_settings
from together_pray.core.exception_handlers import register_exception_handlers
from together_pray.core.lifespan import create_lifespan
from together_pray.shared.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
