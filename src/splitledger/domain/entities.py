"""Domain model entities for splitledger.

These are pure data classes representing business concepts. Balance sheets
are the only mutable state in the system and live in
``splitledger.domain.balance_sheet``; everything here is immutable.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class SplitKind(Enum):
    """Supported ways of dividing an expense between participants."""

    EQUAL = "equal"
    UNEQUAL = "unequal"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class User:
    """User domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Group:
    """Group of users who share expenses."""

    id: str
    name: str
    member_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Split:
    """One participant's share of an expense.

    ``percent`` is only set for percentage input. ``amount`` is None only for
    an unequal share that was never given. Validated splits always carry the
    absolute ``amount``.
    """

    user_id: str
    amount: Optional[Decimal] = Decimal("0")
    percent: Optional[Decimal] = None


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    description: str
    amount: Decimal
    payer_id: str
    kind: SplitKind
    splits: tuple[Split, ...]
    expense_date: date
    group_id: Optional[str] = None

    @property
    def participant_ids(self) -> tuple[str, ...]:
        return tuple(split.user_id for split in self.splits)


@dataclass(frozen=True)
class Balance:
    """Directional amounts between a user and one counterparty.

    The two amounts are kept separately and never netted against each other.
    """

    counterparty_id: str
    owed_by_me: Decimal = Decimal("0")
    owed_to_me: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        """Positive when the counterparty owes more than I owe them."""
        return self.owed_to_me - self.owed_by_me


@dataclass(frozen=True)
class BalanceSheetSnapshot:
    """Read-only view of a user's balance sheet at one point in time."""

    user_id: str
    total_paid: Decimal
    total_own_expense: Decimal
    total_you_owe: Decimal
    total_you_get_back: Decimal
    balances: Mapping[str, Balance] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def balance_with(self, counterparty_id: str) -> Balance:
        """Return the balance with a counterparty, zero if they never shared."""
        return self.balances.get(counterparty_id, Balance(counterparty_id))
