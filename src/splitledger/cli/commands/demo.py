"""Built-in walkthrough command."""

import click
from splitledger.cli.commands.balances import echo_sheet
from splitledger.domain.balance import BalanceService
from splitledger.domain.script_import import ScriptImportService
from splitledger.domain.user import UserService
from splitledger.store.factories import create_memory_store

# Walkthrough ledger: one expense per split kind
DEMO_SCRIPT = {
    "users": [
        {"id": "u1", "name": "Alice"},
        {"id": "u2", "name": "Bob"},
        {"id": "u3", "name": "Carol"},
        {"id": "u4", "name": "Dave"},
    ],
    "groups": [
        {"id": "flat", "name": "Flat", "members": ["u1", "u2", "u3"]},
    ],
    "expenses": [
        {
            "description": "Groceries",
            "amount": "900",
            "payer": "u1",
            "kind": "equal",
            "group": "flat",
        },
        {
            "description": "Taxi",
            "amount": "500",
            "payer": "u2",
            "kind": "unequal",
            "splits": {"u1": "400", "u2": "100"},
        },
        {
            "description": "Concert tickets",
            "amount": "1200",
            "payer": "u4",
            "kind": "percentage",
            "splits": {"u1": "40%", "u2": "20%", "u3": "20%", "u4": "20%"},
        },
    ],
}


@click.command("demo")
@click.option("--net", is_flag=True, help="Show one net amount per counterparty")
@click.pass_context
def run_demo(ctx, net: bool):
    """Run a sample ledger with an equal, unequal and percentage expense.

    Ignores --script; the demo always starts from an empty ledger.
    """
    store = create_memory_store()
    result = ScriptImportService(store).import_document(DEMO_SCRIPT)
    click.echo(f"Applied {result['imported']} sample expense(s)")

    service = BalanceService(store)
    user_service = UserService(store)
    for snapshot in service.list_snapshots():
        echo_sheet(service, user_service, snapshot, net)


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(run_demo)
