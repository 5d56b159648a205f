"""User and group listing commands."""

import click
from splitledger.domain.group import GroupService
from splitledger.domain.user import UserService


@click.command("users")
@click.pass_context
def list_users(ctx):
    """List all users."""
    service = UserService(ctx.obj["store"])

    users = service.list_users()
    if not users:
        click.echo("No users found.")
        return

    click.echo("\nUsers:")
    click.echo("-" * 60)
    for user in users:
        click.echo(f"ID: {user.id:<10s} | {user.name}")


@click.command("groups")
@click.pass_context
def list_groups(ctx):
    """List all groups with their members."""
    service = GroupService(ctx.obj["store"])

    groups = service.list_groups()
    if not groups:
        click.echo("No groups found.")
        return

    click.echo("\nGroups:")
    click.echo("-" * 60)
    for group in groups:
        names = ", ".join(member.name for member in service.list_members(group.id))
        click.echo(f"ID: {group.id:<10s} | {group.name:20s} | Members: {names or '-'}")


def register_commands(cli):
    """Register user and group commands with main CLI."""
    cli.add_command(list_users)
    cli.add_command(list_groups)
