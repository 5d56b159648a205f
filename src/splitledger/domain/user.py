"""User domain service."""

import logging
from typing import Optional

from splitledger.domain.entities import User
from splitledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    user_not_found,
)
from splitledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users."""

    def __init__(self, store: LedgerStore):
        """Initialize user service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def create_user(self, user_id: str, name: str) -> User:
        """Create a new user with an empty balance sheet.

        Args:
            user_id: Unique user identifier
            name: Display name

        Returns:
            The created user

        Raises:
            ValidationError: If the id or name is empty
            ConflictError: If a user with the same id already exists
        """
        user_id = user_id.strip() if user_id else ""
        name = name.strip() if name else ""
        if not user_id:
            raise ValidationError("User id must not be empty")
        if not name:
            raise ValidationError(f"User '{user_id}' must have a name")

        if self.store.get_user(user_id) is not None:
            raise ConflictError(f"User with id '{user_id}' already exists")

        user = User(id=user_id, name=name)
        self.store.add_user(user)
        logger.debug("Created user %s (%s)", user_id, name)
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID.

        Returns:
            User entity or None if not found
        """
        return self.store.get_user(user_id)

    def require_user(self, user_id: str) -> User:
        """Get user by ID or raise NotFoundError."""
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return user

    def list_users(self) -> list[User]:
        """List all users."""
        return self.store.list_users()
