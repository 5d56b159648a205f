"""Store factory functions for creating ledger stores."""

import os
from decimal import Decimal, InvalidOperation
from typing import Optional

from splitledger.domain.splits import EPSILON
from splitledger.store.memory import InMemoryStore


def create_memory_store(epsilon: Optional[Decimal] = None) -> InMemoryStore:
    """Create an empty in-memory store.

    Args:
        epsilon: Split validation tolerance. If None, checks the
            SPLITLEDGER_EPSILON environment variable, then defaults to 0.000001

    Returns:
        InMemoryStore instance

    Raises:
        ValueError: If SPLITLEDGER_EPSILON is not a non-negative number
    """
    if epsilon is None:
        # Check environment variable
        raw = os.environ.get("SPLITLEDGER_EPSILON")
        if raw:
            try:
                epsilon = Decimal(raw)
            except InvalidOperation:
                raise ValueError(f"Invalid SPLITLEDGER_EPSILON value '{raw}'")
            if epsilon < 0:
                raise ValueError(f"SPLITLEDGER_EPSILON must not be negative, got {raw}")

    if epsilon is None:
        epsilon = EPSILON

    return InMemoryStore(epsilon=epsilon)
