"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date
from decimal import Decimal
from typing import Optional

# Import directly to avoid circular import through domain/__init__.py
from splitledger.domain.balance_sheet import BalanceSheet
from splitledger.domain.entities import Expense, Group, User


class LedgerStore(ABC):
    """Owned context holding every user, group, balance sheet and expense.

    A store starts empty. Services receive it explicitly; there is no
    module-level ledger state.
    """

    epsilon: Decimal

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Critical section for mutations that must be applied as one unit."""
        pass

    # User operations
    @abstractmethod
    def add_user(self, user: User) -> None:
        """Store a user and create its empty balance sheet."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in creation order."""
        pass

    @abstractmethod
    def get_balance_sheet(self, user_id: str) -> Optional[BalanceSheet]:
        """Get the live balance sheet of a user."""
        pass

    # Group operations
    @abstractmethod
    def save_group(self, group: Group) -> None:
        """Insert or replace a group."""
        pass

    @abstractmethod
    def get_group(self, group_id: str) -> Optional[Group]:
        """Get group by ID."""
        pass

    @abstractmethod
    def list_groups(self) -> list[Group]:
        """List all groups in creation order."""
        pass

    # Expense operations
    @abstractmethod
    def next_expense_id(self) -> int:
        """Reserve the next expense ID."""
        pass

    @abstractmethod
    def add_expense(self, expense: Expense) -> None:
        """Append an expense to the log."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> list[Expense]:
        """List expenses with optional filters.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            user_id: If set, only expenses the user paid for or took part in
        """
        pass
