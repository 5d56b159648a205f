"""CLI helpers for user resolution and error handling."""

from __future__ import annotations

import click
from splitledger.cli.error_handling import handle_domain_error
from splitledger.domain.user import UserService
from splitledger.utils.user_resolver import resolve_user


def resolve_user_or_exit(ctx: click.Context, user_service: UserService, user: str) -> str:
    """Resolve a user ID or name, or exit with a CLI error."""
    try:
        return resolve_user(user_service, user)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
