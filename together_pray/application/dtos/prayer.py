"""DTOs for prayer item use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from together_pray.domain.enums import PrayerStatus


@dataclass(frozen=True)
class PrayerItemResult:
    """Prayer item read-model (result of update_status)."""

    id: str
    group_id: str
    author_id: str
    title: str
    status: PrayerStatus


@dataclass(frozen=True)
class PrayerStats:
    """Per-status counts of a group's prayer items."""

    group_id: str
    total: int
    praying: int
    partial_answer: int
    answered: int

    @classmethod
    def from_counts(cls, group_id: str, counts: dict[str, int]) -> PrayerStats:
        """Build stats from a status -> count mapping; missing statuses count as 0."""
        by_status = {status: counts.get(status, 0) for status in PrayerStatus.values()}
        return cls(
            group_id=group_id,
            total=sum(by_status.values()),
            praying=by_status[PrayerStatus.PRAYING.value],
            partial_answer=by_status[PrayerStatus.PARTIAL_ANSWER.value],
            answered=by_status[PrayerStatus.ANSWERED.value],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "group_id": self.group_id,
            "total": self.total,
            "praying": self.praying,
            "partial_answer": self.partial_answer,
            "answered": self.answered,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PrayerStats:
        return cls(**data)
