"""In-memory implementation of the ledger store."""

from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from threading import RLock
from typing import Iterator, Optional

from splitledger.domain.balance_sheet import BalanceSheet
from splitledger.domain.entities import Expense, Group, User
from splitledger.store.base import LedgerStore


class InMemoryStore(LedgerStore):
    """Dict-backed ledger store living for the lifetime of the process."""

    def __init__(self, epsilon: Decimal):
        """Initialize an empty store.

        Args:
            epsilon: Tolerance used when validating split sums
        """
        self.epsilon = epsilon
        self._lock = RLock()
        self._users: dict[str, User] = {}
        self._sheets: dict[str, BalanceSheet] = {}
        self._groups: dict[str, Group] = {}
        self._expenses: dict[int, Expense] = {}
        self._last_expense_id = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def add_user(self, user: User) -> None:
        with self._lock:
            if user.id in self._users:
                raise ValueError(f"User '{user.id}' already exists")
            self._users[user.id] = user
            self._sheets[user.id] = BalanceSheet(user.id)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        return list(self._users.values())

    def get_balance_sheet(self, user_id: str) -> Optional[BalanceSheet]:
        return self._sheets.get(user_id)

    def save_group(self, group: Group) -> None:
        with self._lock:
            self._groups[group.id] = group

    def get_group(self, group_id: str) -> Optional[Group]:
        return self._groups.get(group_id)

    def list_groups(self) -> list[Group]:
        return list(self._groups.values())

    def next_expense_id(self) -> int:
        with self._lock:
            self._last_expense_id += 1
            return self._last_expense_id

    def add_expense(self, expense: Expense) -> None:
        with self._lock:
            self._expenses[expense.id] = expense

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        return self._expenses.get(expense_id)

    def list_expenses(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> list[Expense]:
        expenses = []
        for expense in self._expenses.values():
            if start_date is not None and expense.expense_date < start_date:
                continue
            if end_date is not None and expense.expense_date > end_date:
                continue
            if user_id is not None and (
                expense.payer_id != user_id and user_id not in expense.participant_ids
            ):
                continue
            expenses.append(expense)
        return expenses
