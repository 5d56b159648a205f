"""Storage layer for splitledger."""

from splitledger.store.base import LedgerStore
from splitledger.store.factories import create_memory_store

__all__ = ["LedgerStore", "create_memory_store"]
