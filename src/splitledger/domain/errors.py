"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested user, group or expense does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidAmountError(ValidationError):
    """Expense total is zero or negative."""


class EmptySplitError(ValidationError):
    """Expense has no participants."""


class DuplicateParticipantError(ValidationError):
    """The same user appears more than once in a split list."""


class UnequalShareError(ValidationError):
    """An equal split has a share that differs from total / participants."""


class SumMismatchError(ValidationError):
    """Unequal split shares do not add up to the expense total."""


class PercentageSumError(ValidationError):
    """Percentage split percents are out of range or do not add up to 100."""


class UnknownSplitKindError(ValidationError):
    """Split kind is not one of the supported kinds."""


def user_not_found(user_id: str) -> str:
    """Return message for missing user."""
    return f"User '{user_id}' not found"


def group_not_found(group_id: str) -> str:
    """Return message for missing group."""
    return f"Group '{group_id}' not found"


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def duplicate_participant(user_id: str) -> str:
    """Return message for a user listed twice in one expense."""
    return f"User '{user_id}' appears more than once in the split"


def unknown_split_kind(kind: object) -> str:
    """Return message for an unsupported split kind."""
    return f"Unknown split kind '{kind}'. Supported kinds: equal, unequal, percentage"
