"""Per-user balance sheet, the mutable state written by the ledger engine."""

from decimal import Decimal
from types import MappingProxyType

from splitledger.domain.entities import Balance, BalanceSheetSnapshot


class _CounterpartyBalance:
    """Mutable pair of directional amounts for one counterparty."""

    __slots__ = ("owed_by_me", "owed_to_me")

    def __init__(self) -> None:
        self.owed_by_me = Decimal("0")
        self.owed_to_me = Decimal("0")


class BalanceSheet:
    """Running totals and per-counterparty balances for one user.

    Counterparties are keyed by user id. Only the ledger update engine
    mutates a balance sheet; everyone else reads it through ``snapshot``.
    """

    def __init__(self, user_id: str):
        self.user_id = user_id
        self.total_paid = Decimal("0")
        self.total_own_expense = Decimal("0")
        self.total_you_owe = Decimal("0")
        self.total_you_get_back = Decimal("0")
        self._balances: dict[str, _CounterpartyBalance] = {}

    def _entry(self, counterparty_id: str) -> _CounterpartyBalance:
        entry = self._balances.get(counterparty_id)
        if entry is None:
            entry = _CounterpartyBalance()
            self._balances[counterparty_id] = entry
        return entry

    def add_paid(self, amount: Decimal) -> None:
        self.total_paid += amount

    def add_own_expense(self, amount: Decimal) -> None:
        self.total_own_expense += amount

    def add_owed_by_me(self, counterparty_id: str, amount: Decimal) -> None:
        """Record that this user owes ``amount`` more to a counterparty."""
        self._entry(counterparty_id).owed_by_me += amount
        self.total_you_owe += amount

    def add_owed_to_me(self, counterparty_id: str, amount: Decimal) -> None:
        """Record that a counterparty owes this user ``amount`` more."""
        self._entry(counterparty_id).owed_to_me += amount
        self.total_you_get_back += amount

    def snapshot(self) -> BalanceSheetSnapshot:
        """Return a read-only copy of the current state."""
        balances = {
            counterparty_id: Balance(
                counterparty_id=counterparty_id,
                owed_by_me=entry.owed_by_me,
                owed_to_me=entry.owed_to_me,
            )
            for counterparty_id, entry in self._balances.items()
        }
        return BalanceSheetSnapshot(
            user_id=self.user_id,
            total_paid=self.total_paid,
            total_own_expense=self.total_own_expense,
            total_you_owe=self.total_you_owe,
            total_you_get_back=self.total_you_get_back,
            balances=MappingProxyType(balances),
        )
