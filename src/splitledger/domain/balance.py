"""Balance reporting domain service."""

from decimal import Decimal

from splitledger.domain.entities import BalanceSheetSnapshot
from splitledger.domain.errors import NotFoundError, user_not_found
from splitledger.domain.user import UserService
from splitledger.store.base import LedgerStore


class BalanceService:
    """Read-only access to balance sheets."""

    def __init__(self, store: LedgerStore):
        """Initialize balance service.

        Args:
            store: Ledger store instance
        """
        self.store = store
        self.user_service = UserService(store)

    def snapshot(self, user_id: str) -> BalanceSheetSnapshot:
        """Return a read-only view of a user's balance sheet.

        Raises:
            NotFoundError: If the user does not exist
        """
        with self.store.transaction():
            sheet = self.store.get_balance_sheet(user_id)
            if sheet is None:
                raise NotFoundError(user_not_found(user_id))
            return sheet.snapshot()

    def list_snapshots(self) -> list[BalanceSheetSnapshot]:
        """Return snapshots for every user, in user creation order."""
        return [self.snapshot(user.id) for user in self.user_service.list_users()]

    def net_balance(self, user_id: str, other_id: str) -> Decimal:
        """Net amount ``other_id`` owes ``user_id``, derived at read time.

        Negative when ``user_id`` owes more than it is owed.

        Raises:
            NotFoundError: If either user does not exist
        """
        self.user_service.require_user(other_id)
        return self.snapshot(user_id).balance_with(other_id).net

    def describe_balances(self, user_id: str, net: bool = False) -> list[str]:
        """Describe who owes whom from one user's point of view.

        Args:
            user_id: User whose balance sheet to describe
            net: If True, collapse each counterparty into one net line

        Returns:
            One line per non-zero amount, e.g. "Bob owes Alice: 150.00"
        """
        snapshot = self.snapshot(user_id)
        me = self.user_service.require_user(user_id)
        lines = []

        for counterparty_id, balance in snapshot.balances.items():
            other = self.user_service.get_user(counterparty_id)
            other_name = other.name if other is not None else counterparty_id

            if net:
                if balance.net > 0:
                    lines.append(f"{other_name} owes {me.name}: {balance.net:,.2f}")
                elif balance.net < 0:
                    lines.append(f"{me.name} owes {other_name}: {-balance.net:,.2f}")
                continue

            if balance.owed_to_me > 0:
                lines.append(f"{other_name} owes {me.name}: {balance.owed_to_me:,.2f}")
            if balance.owed_by_me > 0:
                lines.append(f"{me.name} owes {other_name}: {balance.owed_by_me:,.2f}")

        return lines
