"""Utility functions for splitledger."""

from splitledger.utils.date_parser import parse_date
from splitledger.utils.amount_parser import parse_amount, parse_percent

__all__ = ["parse_date", "parse_amount", "parse_percent"]
