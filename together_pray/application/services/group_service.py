"""Group service: group lookup and membership checks through the read-through cache."""

from __future__ import annotations

import asyncio
import uuid

from together_pray.application.dtos.group import GroupResult
from together_pray.application.interfaces.repositories import IGroupRepository
from together_pray.core.constants import CacheTTL
from together_pray.domain.enums import GroupRole
from together_pray.domain.exceptions import (
    AlreadyMemberException,
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from together_pray.infrastructure.cache.cache_service import CacheService
from together_pray.infrastructure.cache.keys import (
    group_key,
    membership_admin_key,
    membership_key,
)


class GroupService:
    """Groups and memberships; reads are cached for CacheTTL.MEDIUM.

    Every write invalidates the entries it makes stale before returning.
    """

    def __init__(self, group_repo: IGroupRepository, cache: CacheService) -> None:
        self.group_repo = group_repo
        self.cache = cache

    async def create_group(
        self, user_id: str, name: str, description: str | None = None
    ) -> GroupResult:
        """Create a group with user as admin and a fresh invite code."""
        if not name or not name.strip():
            raise ValidationException("Group name is required", field="name")
        group = await self.group_repo.create_with_admin(
            user_id=user_id,
            name=name.strip(),
            description=description,
            invite_code=str(uuid.uuid4()),
        )
        await self.cache.invalidate_user(user_id)
        return group

    async def get_group(self, group_id: str, user_id: str) -> GroupResult:
        """Return group with members if user belongs to it.

        A missing group loads as None, which the cache treats as a miss,
        so it is queried again on the next call.

        Raises:
            ResourceNotFoundException: If the group does not exist.
            AuthorizationException: If user is not a member.
        """

        async def load() -> dict | None:
            group = await self.group_repo.get_with_members(group_id)
            return group.to_dict() if group is not None else None

        data = await self.cache.get_or_set(group_key(group_id), load, CacheTTL.MEDIUM)
        if data is None:
            raise ResourceNotFoundException("group", group_id)
        group = GroupResult.from_dict(data)
        if not group.has_member(user_id):
            raise AuthorizationException(
                "You are not a member of this group", group_id=group_id
            )
        return group

    async def join_by_invite_code(self, user_id: str, invite_code: str) -> GroupResult:
        """Add user to the group behind invite_code as a member.

        Raises:
            ResourceNotFoundException: If no group has this invite code.
            AlreadyMemberException: If user already belongs to the group.
        """
        group = await self.group_repo.get_by_invite_code(invite_code)
        if group is None:
            raise ResourceNotFoundException("invite_code", invite_code)
        if group.has_member(user_id):
            raise AlreadyMemberException(group.id, user_id)

        await self.group_repo.add_member(group.id, user_id, GroupRole.MEMBER)
        await asyncio.gather(
            self.cache.invalidate_group(group.id),
            self.cache.invalidate_membership(user_id, group.id),
        )
        return await self.get_group(group.id, user_id)

    async def check_membership(self, group_id: str, user_id: str) -> bool:
        """Return True if user belongs to group (False is cached too)."""

        async def load() -> bool:
            return await self.group_repo.is_member(group_id, user_id)

        return await self.cache.get_or_set(
            membership_key(user_id, group_id), load, CacheTTL.MEDIUM
        )

    async def is_admin(self, group_id: str, user_id: str) -> bool:
        """Return True if user is an admin of group."""

        async def load() -> bool:
            return await self.group_repo.is_admin(group_id, user_id)

        return await self.cache.get_or_set(
            membership_admin_key(user_id, group_id), load, CacheTTL.MEDIUM
        )
