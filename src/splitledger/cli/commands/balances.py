"""Balance display commands."""

import click
from splitledger.cli.user_resolution import resolve_user_or_exit
from splitledger.domain.balance import BalanceService
from splitledger.domain.entities import BalanceSheetSnapshot
from splitledger.domain.user import UserService


def echo_sheet(service: BalanceService, user_service: UserService,
               snapshot: BalanceSheetSnapshot, net: bool) -> None:
    """Print one balance sheet with its totals and owed amounts."""
    user = user_service.require_user(snapshot.user_id)
    click.echo(f"\n{user.name} ({user.id})")
    click.echo("-" * 60)
    for label, value in (
        ("Total paid", snapshot.total_paid),
        ("Total own expense", snapshot.total_own_expense),
        ("Total you owe", snapshot.total_you_owe),
        ("Total you get back", snapshot.total_you_get_back),
    ):
        click.echo(f"  {label + ':':<20} {value:>12,.2f}")

    lines = service.describe_balances(snapshot.user_id, net=net)
    if not lines:
        click.echo("  No balances")
    for line in lines:
        click.echo(f"  {line}")


@click.command("balances")
@click.argument("user", required=False, metavar="[USER]")
@click.option("--net", is_flag=True, help="Show one net amount per counterparty")
@click.pass_context
def show_balances(ctx, user: str | None, net: bool):
    """Show balance sheets.

    USER can be a user ID or name. Without it every user is shown.

    Owed amounts are kept per direction; --net subtracts them for display.

    Examples:
        splitledger --script trip.json balances
        splitledger --script trip.json balances alice --net
    """
    store = ctx.obj["store"]
    service = BalanceService(store)
    user_service = UserService(store)

    if user is not None:
        user_id = resolve_user_or_exit(ctx, user_service, user)
        snapshots = [service.snapshot(user_id)]
    else:
        snapshots = service.list_snapshots()

    if not snapshots:
        click.echo("No users found.")
        return

    for snapshot in snapshots:
        echo_sheet(service, user_service, snapshot, net)


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(show_balances)
