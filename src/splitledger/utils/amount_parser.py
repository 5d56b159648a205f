"""Amount and percent parsing utilities."""

import re
from decimal import Decimal, InvalidOperation


def parse_amount(value: str | int | float | Decimal) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - 123.45 (int, float or Decimal)
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        value: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValueError(f"Could not parse amount {value!r}")
    if isinstance(value, (int, float, Decimal)):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise ValueError(f"Could not parse amount {value!r}")
        return amount

    if not value or not value.strip():
        raise ValueError("Empty amount string")

    amount_str = value.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and thousands separators
    amount_str = re.sub(r"[$€£¥]", "", amount_str).replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{value}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{value}'")
    return -amount if is_negative else amount


def parse_percent(value: str | int | float | Decimal) -> Decimal:
    """Parse a percent such as 25, "25", "25%" or "12.5 %" into a Decimal.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, str):
        value = value.strip().removesuffix("%")
    try:
        return parse_amount(value)
    except ValueError:
        raise ValueError(f"Could not parse percent {value!r}")
