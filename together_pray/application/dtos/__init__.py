"""Application DTOs (no ORM dependency)."""

from together_pray.application.dtos.group import GroupMemberResult, GroupResult
from together_pray.application.dtos.prayer import PrayerItemResult, PrayerStats

__all__ = [
    "GroupMemberResult",
    "GroupResult",
    "PrayerItemResult",
    "PrayerStats",
]
