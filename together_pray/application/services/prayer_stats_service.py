"""Prayer statistics per group, cached for CacheTTL.SHORT."""

from __future__ import annotations

import logging

from together_pray.application.dtos.prayer import PrayerItemResult, PrayerStats
from together_pray.application.interfaces.repositories import IPrayerItemRepository
from together_pray.core.constants import CacheTTL
from together_pray.domain.enums import PrayerStatus
from together_pray.domain.exceptions import ResourceNotFoundException
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.keys import prayer_stats_key

logger = logging.getLogger(__name__)


class PrayerStatsService:
    """Status counts of a group's prayer items; status changes invalidate them."""

    def __init__(self, prayer_repo: IPrayerItemRepository, cache: CacheService) -> None:
        self.prayer_repo = prayer_repo
        self.cache = cache

    async def get_group_stats(self, group_id: str) -> PrayerStats:
        """Return per-status counts for group (read-through, short TTL)."""

        async def load() -> dict:
            counts = await self.prayer_repo.count_by_status(group_id)
            return PrayerStats.from_counts(group_id, counts).to_dict()

        data = await self.cache.get_or_set(prayer_stats_key(group_id), load, CacheTTL.SHORT)
        return PrayerStats.from_dict(data)

    async def update_status(self, item_id: str, status: PrayerStatus) -> PrayerItemResult:
        """Persist a new status for item, then drop its group's cached stats.

        Raises:
            ResourceNotFoundException: If the prayer item does not exist.
        """
        item = await self.prayer_repo.update_status(item_id, status)
        if item is None:
            raise ResourceNotFoundException("prayer_item", item_id)
        await self.cache.invalidate_prayer_stats(item.group_id)
        logger.info("Prayer item %s marked %s", item_id, status.value)
        return item
