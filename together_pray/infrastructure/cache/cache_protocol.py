"""Cache store protocols (DIP).

CacheStore is the minimal key/value capability CacheService needs.
KeyListingStore is an optional extra capability used only by prefix
sweeps; CacheService checks for it with isinstance.
"""

from typing import Any, Protocol, runtime_checkable


class CacheStore(Protocol):
    """Protocol for cache backends (in-memory, Redis)."""

    @property
    def name(self) -> str:
        """Backend name for logs and error details."""
        ...

    async def ping(self) -> bool:
        """Return True if the backend answers; raise CacheBackendUnavailableError if not."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None on a miss."""
        ...

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store value; ttl_seconds=None means no expiry."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache. Missing keys are not an error."""
        ...


@runtime_checkable
class KeyListingStore(Protocol):
    """Optional capability: enumerate live keys."""

    async def list_keys(self, prefix: str | None = None) -> list[str]:
        """Return non-expired keys, only those starting with prefix when given."""
        ...
