"""Pytest configuration and fixtures for together_pray.

Uses together_pray.main:app for HTTP tests and an InMemoryStore driven
by a manual clock for cache tests. All imports use together_pray.*.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.memory_store import InMemoryStore
from together_pray.main import app


class ManualClock:
    """Monotonic clock that only moves when advance() is called."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store(clock: ManualClock) -> InMemoryStore:
    """Empty in-memory store on the manual clock."""
    return InMemoryStore(clock=clock)


@pytest.fixture
def cache(store: InMemoryStore) -> CacheService:
    """CacheService over the in-memory store."""
    return CacheService(store)


@pytest.fixture
async def client(cache: CacheService) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI).

    ASGITransport does not run the lifespan, so the cache is placed on
    app.state here and removed afterwards.
    """
    app.state.cache = cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.cache = None
