"""Group domain service."""

from dataclasses import replace
from typing import Optional, Sequence

from splitledger.domain.entities import Group, User
from splitledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    group_not_found,
)
from splitledger.domain.user import UserService
from splitledger.store.base import LedgerStore


class GroupService:
    """Service for managing groups of users."""

    def __init__(self, store: LedgerStore):
        """Initialize group service.

        Args:
            store: Ledger store instance
        """
        self.store = store
        self.user_service = UserService(store)

    def create_group(
        self, group_id: str, name: str, member_ids: Sequence[str] = ()
    ) -> Group:
        """Create a group.

        Args:
            group_id: Unique group identifier
            name: Group name
            member_ids: Initial member user IDs, in display order

        Returns:
            The created group

        Raises:
            ValidationError: If the id or name is empty
            ConflictError: If the group exists or a member is listed twice
            NotFoundError: If a member does not exist
        """
        group_id = group_id.strip() if group_id else ""
        if not group_id:
            raise ValidationError("Group id must not be empty")
        if not name or not name.strip():
            raise ValidationError(f"Group '{group_id}' must have a name")
        if self.store.get_group(group_id) is not None:
            raise ConflictError(f"Group with id '{group_id}' already exists")

        members: list[str] = []
        for member_id in member_ids:
            self.user_service.require_user(member_id)
            if member_id in members:
                raise ConflictError(
                    f"User '{member_id}' is listed twice in group '{group_id}'"
                )
            members.append(member_id)

        group = Group(id=group_id, name=name.strip(), member_ids=tuple(members))
        self.store.save_group(group)
        return group

    def add_member(self, group_id: str, user_id: str) -> Group:
        """Add a user to a group.

        Raises:
            NotFoundError: If the group or user does not exist
            ConflictError: If the user is already a member
        """
        group = self.require_group(group_id)
        self.user_service.require_user(user_id)
        if user_id in group.member_ids:
            raise ConflictError(f"User '{user_id}' is already a member of '{group_id}'")

        group = replace(group, member_ids=group.member_ids + (user_id,))
        self.store.save_group(group)
        return group

    def get_group(self, group_id: str) -> Optional[Group]:
        """Get group by ID."""
        return self.store.get_group(group_id)

    def require_group(self, group_id: str) -> Group:
        """Get group by ID or raise NotFoundError."""
        group = self.store.get_group(group_id)
        if group is None:
            raise NotFoundError(group_not_found(group_id))
        return group

    def list_groups(self) -> list[Group]:
        """List all groups."""
        return self.store.list_groups()

    def list_members(self, group_id: str) -> list[User]:
        """List the members of a group as users, in group order."""
        group = self.require_group(group_id)
        return [self.user_service.require_user(member_id) for member_id in group.member_ids]
