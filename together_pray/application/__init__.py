"""Application layer: interfaces, DTOs, services.

Depends only on domain, protocol definitions and the cache coordinator.
Persistence implements the repository interfaces.
"""

from together_pray.application.interfaces import IGroupRepository, IPrayerItemRepository
from together_pray.application.services import GroupService, PrayerStatsService

__all__ = [
    "GroupService",
    "IGroupRepository",
    "IPrayerItemRepository",
    "PrayerStatsService",
]
