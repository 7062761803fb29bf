"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation.
"""

from together_pray.domain.enums import CachePrefix, GroupRole, PrayerStatus
from together_pray.domain.exceptions import (
    AlreadyMemberException,
    AuthorizationException,
    CacheBackendUnavailableError,
    CacheInvalidationError,
    ResourceNotFoundException,
    TogetherPrayException,
    ValidationException,
)

__all__ = [
    "AlreadyMemberException",
    "AuthorizationException",
    "CacheBackendUnavailableError",
    "CacheInvalidationError",
    "CachePrefix",
    "GroupRole",
    "PrayerStatus",
    "ResourceNotFoundException",
    "TogetherPrayException",
    "ValidationException",
]
