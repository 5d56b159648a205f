"""Expense domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from splitledger.domain.entities import Expense, Split, SplitKind
from splitledger.domain.errors import (
    NotFoundError,
    ValidationError,
    expense_not_found,
)
from splitledger.domain.group import GroupService
from splitledger.domain.ledger import apply_expense
from splitledger.domain.splits import parse_split_kind, resolve_validator
from splitledger.domain.user import UserService
from splitledger.store.base import LedgerStore

logger = logging.getLogger(__name__)

SplitInput = tuple[str, Optional[Decimal]]


class ExpenseService:
    """Service for creating expenses and applying them to the ledger."""

    def __init__(self, store: LedgerStore):
        """Initialize expense service.

        Args:
            store: Ledger store instance
        """
        self.store = store
        self.user_service = UserService(store)
        self.group_service = GroupService(store)

    def create_expense(
        self,
        description: str,
        amount: Decimal,
        kind: SplitKind | str,
        split_inputs: Sequence[SplitInput],
        payer_id: str,
        expense_date: Optional[date] = None,
        group_id: Optional[str] = None,
    ) -> Expense:
        """Validate an expense and apply it to every participant's balance sheet.

        Either the expense is fully applied or nothing changes: every check
        runs before the ledger is touched.

        Args:
            description: Expense description
            amount: Expense total
            kind: Split kind (enum or name such as "equal")
            split_inputs: Ordered (user_id, value) pairs. The value is the
                absolute share for equal and unequal splits and the percent
                for percentage splits. For equal splits a None value is filled
                with amount / number of participants.
            payer_id: ID of the user who paid
            expense_date: Date of the expense (defaults to today)
            group_id: Optional group the expense belongs to

        Returns:
            The applied expense

        Raises:
            UnknownSplitKindError: If the kind is not supported
            NotFoundError: If the payer, a participant or the group does not exist
            ValidationError: If the split is invalid (see splitledger.domain.splits)
        """
        split_kind = parse_split_kind(kind)
        validator = resolve_validator(split_kind)

        amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))

        self.user_service.require_user(payer_id)
        for user_id, _ in split_inputs:
            self.user_service.require_user(user_id)
        if group_id is not None:
            self.group_service.require_group(group_id)

        splits = self._build_splits(split_kind, amount, split_inputs)

        try:
            resolved = validator(splits, amount, epsilon=self.store.epsilon)
        except ValidationError as e:
            logger.info("Rejected expense '%s': %s", description, e)
            raise

        expense = Expense(
            id=self.store.next_expense_id(),
            description=description,
            amount=amount,
            payer_id=payer_id,
            kind=split_kind,
            splits=resolved,
            expense_date=expense_date or date.today(),
            group_id=group_id,
        )

        with self.store.transaction():
            self.store.add_expense(expense)
            apply_expense(self.store, payer_id, expense.splits, expense.amount)

        logger.info(
            "Applied expense %d '%s' (%s, %s) paid by %s",
            expense.id,
            description,
            amount,
            split_kind.value,
            payer_id,
        )
        return expense

    def create_group_expense(
        self,
        description: str,
        amount: Decimal,
        kind: SplitKind | str,
        payer_id: str,
        group_id: str,
        shares: Optional[Mapping[str, Decimal]] = None,
        expense_date: Optional[date] = None,
    ) -> Expense:
        """Create an expense split across every member of a group.

        Equal splits need no shares. For unequal and percentage splits,
        ``shares`` maps member IDs to amounts or percents; members left out
        get zero.

        Raises:
            NotFoundError: If the group does not exist
            ValidationError: If shares name a user outside the group
        """
        members = self.group_service.list_members(group_id)
        member_ids = [member.id for member in members]
        shares = shares or {}

        outsiders = [user_id for user_id in shares if user_id not in member_ids]
        if outsiders:
            raise ValidationError(
                f"Users not in group '{group_id}': {', '.join(outsiders)}"
            )

        if parse_split_kind(kind) == SplitKind.EQUAL and not shares:
            split_inputs = [(member_id, None) for member_id in member_ids]
        else:
            split_inputs = [
                (member_id, shares.get(member_id, Decimal("0")))
                for member_id in member_ids
            ]

        return self.create_expense(
            description=description,
            amount=amount,
            kind=kind,
            split_inputs=split_inputs,
            payer_id=payer_id,
            expense_date=expense_date,
            group_id=group_id,
        )

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        return self.store.get_expense(expense_id)

    def require_expense(self, expense_id: int) -> Expense:
        """Get expense by ID or raise NotFoundError."""
        expense = self.store.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        user_id: Optional[str] = None,
    ) -> list[Expense]:
        """List applied expenses.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            user_id: Optional user filter (payer or participant)

        Raises:
            NotFoundError: If user_id is given and does not exist
        """
        if user_id is not None:
            self.user_service.require_user(user_id)
        return self.store.list_expenses(
            start_date=start_date, end_date=end_date, user_id=user_id
        )

    @staticmethod
    def _build_splits(
        kind: SplitKind, amount: Decimal, split_inputs: Sequence[SplitInput]
    ) -> list[Split]:
        """Turn raw (user_id, value) pairs into splits for the validator."""
        splits = []
        for user_id, value in split_inputs:
            if value is not None and not isinstance(value, Decimal):
                value = Decimal(str(value))

            if kind == SplitKind.PERCENTAGE:
                splits.append(Split(user_id=user_id, percent=value))
            elif value is None and kind == SplitKind.EQUAL:
                splits.append(Split(user_id=user_id, amount=amount / len(split_inputs)))
            else:
                splits.append(Split(user_id=user_id, amount=value))
        return splits
