"""Domain enumerations for Together Pray.

Enums represent fixed sets of domain values (cache prefixes, roles, prayer status).
"""

from enum import Enum


class CachePrefix(str, Enum):
    """Category tag at the front of every cache key.

    Closed set: key builders reject anything that is not a member.
    """

    GROUP = "group"
    USER = "user"
    PRAYER_STATS = "prayer_stats"
    MEMBERSHIP = "membership"

    @classmethod
    def values(cls) -> list[str]:
        """Return all prefix values as strings."""
        return [prefix.value for prefix in cls]


class GroupRole(str, Enum):
    """Role of a member inside a group."""

    ADMIN = "admin"
    MEMBER = "member"


class PrayerStatus(str, Enum):
    """Lifecycle of a prayer item."""

    PRAYING = "praying"
    PARTIAL_ANSWER = "partial_answer"
    ANSWERED = "answered"

    @classmethod
    def values(cls) -> list[str]:
        """Return all status values as strings.

        Returns:
            List of enum value strings (e.g. for stats aggregation).
        """
        return [status.value for status in cls]
