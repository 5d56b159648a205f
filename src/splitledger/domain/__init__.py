"""Domain layer for splitledger."""

from splitledger.domain.entities import (
    Balance,
    BalanceSheetSnapshot,
    Expense,
    Group,
    Split,
    SplitKind,
    User,
)
from splitledger.domain.errors import DomainError, ValidationError

__all__ = [
    "Balance",
    "BalanceSheetSnapshot",
    "Expense",
    "Group",
    "Split",
    "SplitKind",
    "User",
    "DomainError",
    "ValidationError",
]
