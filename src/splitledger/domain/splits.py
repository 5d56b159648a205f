"""Split validation rules and split kind resolution.

Each split kind maps to a pure validator function. A validator checks a
proposed list of splits against the expense total and returns the splits with
absolute amounts, ready for the ledger update engine.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Callable, Sequence

from splitledger.domain.entities import Split, SplitKind
from splitledger.domain.errors import (
    DuplicateParticipantError,
    EmptySplitError,
    InvalidAmountError,
    PercentageSumError,
    SumMismatchError,
    UnequalShareError,
    UnknownSplitKindError,
    duplicate_participant,
    unknown_split_kind,
)

EPSILON = Decimal("0.000001")
HUNDRED = Decimal("100")

Validator = Callable[..., tuple[Split, ...]]


def _check_common(splits: Sequence[Split], total_amount: Decimal) -> None:
    """Checks shared by every split kind."""
    if total_amount <= 0:
        raise InvalidAmountError(f"Expense amount must be positive, got {total_amount}")

    if not splits:
        raise EmptySplitError("Expense must have at least one participant")

    seen = set()
    for split in splits:
        if split.user_id in seen:
            raise DuplicateParticipantError(duplicate_participant(split.user_id))
        seen.add(split.user_id)


def validate_equal(
    splits: Sequence[Split], total_amount: Decimal, epsilon: Decimal = EPSILON
) -> tuple[Split, ...]:
    """Validate that every participant carries total / n.

    Raises:
        UnequalShareError: If any share deviates from the equal share
    """
    _check_common(splits, total_amount)

    expected = total_amount / len(splits)
    for split in splits:
        if abs(split.amount - expected) > epsilon:
            raise UnequalShareError(
                f"Share of user '{split.user_id}' is {split.amount}, "
                f"expected {expected} for an equal split"
            )
    return tuple(splits)


def validate_unequal(
    splits: Sequence[Split], total_amount: Decimal, epsilon: Decimal = EPSILON
) -> tuple[Split, ...]:
    """Validate arbitrary non-negative shares that add up to the total.

    Raises:
        SumMismatchError: If a share is negative or the shares do not sum
            to the total
    """
    _check_common(splits, total_amount)

    for split in splits:
        if split.amount is None:
            raise SumMismatchError(f"User '{split.user_id}' has no share")
        if split.amount < 0:
            raise SumMismatchError(
                f"Share of user '{split.user_id}' must not be negative, got {split.amount}"
            )

    share_sum = sum((split.amount for split in splits), Decimal("0"))
    if abs(share_sum - total_amount) > epsilon:
        raise SumMismatchError(
            f"Shares add up to {share_sum}, expected {total_amount}"
        )
    return tuple(splits)


def validate_percentage(
    splits: Sequence[Split], total_amount: Decimal, epsilon: Decimal = EPSILON
) -> tuple[Split, ...]:
    """Validate percents and derive absolute shares from them.

    Returns:
        Splits whose amount is percent / 100 * total_amount

    Raises:
        PercentageSumError: If a percent is missing, outside 0-100, or the
            percents do not sum to 100
    """
    _check_common(splits, total_amount)

    for split in splits:
        if split.percent is None:
            raise PercentageSumError(f"User '{split.user_id}' has no percent")
        if split.percent < 0 or split.percent > HUNDRED:
            raise PercentageSumError(
                f"Percent of user '{split.user_id}' must be between 0 and 100, "
                f"got {split.percent}"
            )

    percent_sum = sum((split.percent for split in splits), Decimal("0"))
    if abs(percent_sum - HUNDRED) > epsilon:
        raise PercentageSumError(f"Percents add up to {percent_sum}, expected 100")

    return tuple(
        replace(split, amount=split.percent / HUNDRED * total_amount)
        for split in splits
    )


SPLIT_VALIDATORS: dict[SplitKind, Validator] = {
    SplitKind.EQUAL: validate_equal,
    SplitKind.UNEQUAL: validate_unequal,
    SplitKind.PERCENTAGE: validate_percentage,
}


def parse_split_kind(kind: SplitKind | str) -> SplitKind:
    """Parse a split kind from its enum value or name (case-insensitive).

    Raises:
        UnknownSplitKindError: If the kind is not supported
    """
    if isinstance(kind, SplitKind):
        return kind
    if isinstance(kind, str):
        try:
            return SplitKind(kind.strip().lower())
        except ValueError:
            pass
    raise UnknownSplitKindError(unknown_split_kind(kind))


def resolve_validator(kind: SplitKind | str) -> Validator:
    """Return the validator for a split kind.

    Raises:
        UnknownSplitKindError: If the kind is not supported
    """
    return SPLIT_VALIDATORS[parse_split_kind(kind)]
