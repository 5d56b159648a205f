"""Ledger script check command."""

import click


@click.command("check")
@click.pass_context
def check_script(ctx):
    """Report how many expenses the ledger script applied or rejected.

    Exits with status 1 when any expense was rejected.

    Examples:
        splitledger --script trip.json check
    """
    result = ctx.obj["import_result"]

    click.echo(f"Imported: {result['imported']} expense(s)")
    click.echo(f"Rejected: {result['rejected']} expense(s)")
    for error in result["errors"]:
        click.echo(f"  {error}", err=True)

    if result["rejected"]:
        ctx.exit(1)


def register_commands(cli):
    """Register check command with main CLI."""
    cli.add_command(check_script)
