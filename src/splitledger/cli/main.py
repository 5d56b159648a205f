"""Main CLI entry point."""

import logging

import click
from splitledger.domain.errors import DomainError
from splitledger.domain.script_import import ScriptImportService
from splitledger.store.factories import create_memory_store

# Import and register all commands at module level
from splitledger.cli.commands import balances, check, demo, expenses, users


@click.group()
@click.option(
    "--script",
    type=click.Path(dir_okay=False),
    help="Ledger script to replay before running the command "
    "(overrides SPLITLEDGER_SCRIPT environment variable)",
    envvar="SPLITLEDGER_SCRIPT",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SPLITLEDGER_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, script: str | None, log_level: str):
    """Splitledger - Shared expense balances.

    Replays a ledger script of users, groups and expenses, then reports
    who owes whom.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Build the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    try:
        store = create_memory_store()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    result = {"imported": 0, "rejected": 0, "errors": []}
    if script is not None:
        try:
            result = ScriptImportService(store).import_script(script)
        except (FileNotFoundError, DomainError) as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    ctx.obj["store"] = store
    ctx.obj["import_result"] = result


# Register all commands
users.register_commands(cli)
balances.register_commands(cli)
expenses.register_commands(cli)
check.register_commands(cli)
demo.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
