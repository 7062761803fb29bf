"""Domain exceptions for Together Pray.

Defines domain-level exceptions for business rule violations and for
cache-layer failures that callers must see. Presentation layer maps them
to HTTP responses in exception handlers.
"""

from typing import Any


class TogetherPrayException(Exception):
    """Base exception for all Together Pray errors.

    All custom exceptions inherit from this class so the presentation
    layer can map them using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TogetherPrayException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(TogetherPrayException):
    """Raised when the user may not access the requested resource."""

    def __init__(self, message: str = "Permission denied", **details: Any) -> None:
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(TogetherPrayException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'group', 'invite_code').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AlreadyMemberException(TogetherPrayException):
    """Raised when a user joins a group they already belong to."""

    def __init__(self, group_id: str, user_id: str) -> None:
        super().__init__(
            "You are already a member of this group",
            "ALREADY_MEMBER",
            {"group_id": group_id, "user_id": user_id},
        )


class CacheBackendUnavailableError(TogetherPrayException):
    """Raised when the cache store cannot reach its backend.

    Propagated unchanged; the cache layer never retries.
    """

    def __init__(self, operation: str, backend: str, reason: str) -> None:
        """Initialize with the failing operation and backend.

        Args:
            operation: Store operation that failed (e.g. 'get', 'set').
            backend: Backend name (e.g. 'redis').
            reason: Underlying error text.
        """
        super().__init__(
            f"Cache backend {backend} unavailable during {operation}",
            "CACHE_UNAVAILABLE",
            {"operation": operation, "backend": backend, "reason": reason},
        )


class CacheInvalidationError(TogetherPrayException):
    """Raised when one or more deletions of a prefix sweep fail.

    Carries every failed key so no failure is lost; deletions that
    succeeded are not rolled back.
    """

    def __init__(self, prefix: str, failures: dict[str, BaseException]) -> None:
        """Initialize with the swept prefix and per-key failures.

        Args:
            prefix: Prefix that was being swept.
            failures: Mapping of cache key to the exception its deletion raised.
        """
        self.failures = failures
        super().__init__(
            f"Failed to invalidate {len(failures)} key(s) under prefix {prefix!r}",
            "CACHE_INVALIDATION_ERROR",
            {
                "prefix": prefix,
                "failed_keys": sorted(failures),
                "errors": {key: str(exc) for key, exc in failures.items()},
            },
        )
