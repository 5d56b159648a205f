"""Expense listing command."""

import click
from splitledger.cli.date_filters import period_options, resolve_cli_date_range
from splitledger.cli.user_resolution import resolve_user_or_exit
from splitledger.domain.expense import ExpenseService
from splitledger.domain.user import UserService


@click.command("expenses")
@click.argument("user", required=False, metavar="[USER]")
@period_options
@click.option("--verbose", "-v", is_flag=True, help="Show every participant's share")
@click.pass_context
def list_expenses(
    ctx,
    user: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
    verbose: bool,
):
    """List applied expenses with optional filters.

    USER can be a user ID or name; only expenses they paid for or share are
    listed.

    Examples:
        splitledger --script trip.json expenses
        splitledger --script trip.json expenses alice --last-month
    """
    store = ctx.obj["store"]
    service = ExpenseService(store)
    user_service = UserService(store)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "this-week": this_week,
            "last-month": last_month,
            "last-year": last_year,
            "last-week": last_week,
        },
    )

    user_id = resolve_user_or_exit(ctx, user_service, user) if user else None
    expenses = service.list_expenses(start_date=start, end_date=end, user_id=user_id)

    if not expenses:
        click.echo("No expenses found.")
        return

    names = {u.id: u.name for u in user_service.list_users()}

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Amount':>12}  {'Kind':<11} {'Paid by':<20} {'Description':<30}"
    )
    click.echo("-" * 100)

    for expense in expenses:
        payer = names.get(expense.payer_id, expense.payer_id)
        click.echo(
            f"{expense.id:<6} {str(expense.expense_date):<12} {expense.amount:>12,.2f}  "
            f"{expense.kind.value:<11} {payer:<20} {expense.description[:30]:<30}"
        )
        if verbose:
            for split in expense.splits:
                share = f"{split.amount:,.2f}"
                if split.percent is not None:
                    share += f" ({split.percent}%)"
                click.echo(f"{'':<6} {names.get(split.user_id, split.user_id)}: {share}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(list_expenses)
