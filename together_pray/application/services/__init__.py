"""Application services: group lookup/membership and prayer statistics."""

from together_pray.application.services.group_service import GroupService
from together_pray.application.services.prayer_stats_service import PrayerStatsService

__all__ = [
    "GroupService",
    "PrayerStatsService",
]
