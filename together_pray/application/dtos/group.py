"""DTOs for group use cases (no dependency on ORM).

Cached as plain dicts (to_dict/from_dict) so the Redis store can
JSON-encode them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from together_pray.domain.enums import GroupRole


@dataclass(frozen=True)
class GroupMemberResult:
    """Member of a group, with the public part of the user."""

    user_id: str
    role: GroupRole
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "role": self.role.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GroupMemberResult:
        return cls(
            user_id=data["user_id"],
            role=GroupRole(data["role"]),
            name=data["name"],
            email=data["email"],
        )


@dataclass(frozen=True)
class GroupResult:
    """Group read-model with members (result of get_with_members, create_with_admin)."""

    id: str
    name: str
    description: str | None
    invite_code: str
    members: tuple[GroupMemberResult, ...] = field(default_factory=tuple)
    prayer_item_count: int = 0

    def has_member(self, user_id: str) -> bool:
        return any(m.user_id == user_id for m in self.members)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "invite_code": self.invite_code,
            "members": [m.to_dict() for m in self.members],
            "prayer_item_count": self.prayer_item_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GroupResult:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            invite_code=data["invite_code"],
            members=tuple(GroupMemberResult.from_dict(m) for m in data.get("members", [])),
            prayer_item_count=data.get("prayer_item_count", 0),
        )
