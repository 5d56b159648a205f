"""Ledger update engine.

Applies an already validated expense to the balance sheets of the payer and
every participant. The engine never validates; callers go through
``ExpenseService`` which validates first. Every balance sheet is looked up
before any is written, and an unknown user id raises KeyError with nothing
changed.
"""

import logging
from decimal import Decimal
from typing import Sequence

from splitledger.domain.entities import Split
from splitledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


def apply_expense(
    store: LedgerStore, payer_id: str, splits: Sequence[Split], total_amount: Decimal
) -> None:
    """Update balance sheets for one validated expense.

    The payer's paid total grows by the full amount. The payer's own share is
    recorded as own expense. Every other share becomes a debt from the
    participant to the payer, recorded on both sides. Directional amounts are
    accumulated separately and never netted.

    Args:
        store: Ledger store holding the balance sheets
        payer_id: ID of the user who paid
        splits: Validated splits with absolute amounts
        total_amount: Expense total
    """
    with store.transaction():
        payer_sheet = store.get_balance_sheet(payer_id)
        participant_sheets = [
            (split, store.get_balance_sheet(split.user_id)) for split in splits
        ]
        missing = [split.user_id for split, sheet in participant_sheets if sheet is None]
        if payer_sheet is None:
            missing.insert(0, payer_id)
        if missing:
            raise KeyError(f"No balance sheet for {', '.join(missing)}")

        payer_sheet.add_paid(total_amount)

        for split, sheet in participant_sheets:
            if split.user_id == payer_id:
                payer_sheet.add_own_expense(split.amount)
                continue

            payer_sheet.add_owed_to_me(split.user_id, split.amount)
            sheet.add_owed_by_me(payer_id, split.amount)
            sheet.add_own_expense(split.amount)

    logger.debug(
        "Applied %s paid by %s across %d participant(s)",
        total_amount,
        payer_id,
        len(splits),
    )
