"""Repository interfaces (ports) for the application layer.

Protocols define contracts that persistence implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from together_pray.domain.enums import GroupRole, PrayerStatus

if TYPE_CHECKING:
    from together_pray.application.dtos.group import GroupResult
    from together_pray.application.dtos.prayer import PrayerItemResult


class IGroupRepository(Protocol):
    """Protocol for group and membership persistence (DIP)."""

    async def get_with_members(self, group_id: str) -> GroupResult | None:
        """Return group with members and prayer item count, or None."""

    async def get_by_invite_code(self, invite_code: str) -> GroupResult | None:
        """Return group (with members) for an invite code, or None."""

    async def create_with_admin(
        self,
        user_id: str,
        name: str,
        description: str | None,
        invite_code: str,
    ) -> GroupResult:
        """Create group and add user as its admin in one transaction."""

    async def add_member(self, group_id: str, user_id: str, role: GroupRole) -> None:
        """Add user to group with role."""

    async def is_member(self, group_id: str, user_id: str) -> bool:
        """Return True if user belongs to group."""

    async def is_admin(self, group_id: str, user_id: str) -> bool:
        """Return True if user is an admin of group."""


class IPrayerItemRepository(Protocol):
    """Protocol for prayer item persistence (DIP)."""

    async def count_by_status(self, group_id: str) -> dict[str, int]:
        """Return prayer item counts keyed by status value for group."""

    async def update_status(self, item_id: str, status: PrayerStatus) -> PrayerItemResult | None:
        """Set status of item; return updated item or None if not found."""
