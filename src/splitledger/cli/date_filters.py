"""CLI helpers for date range resolution."""

from datetime import date

import click

from splitledger.utils.date_parser import get_date_range, parse_date


def period_options(command):
    """Attach --start-date/--end-date and the --this-*/--last-* period flags."""
    for flag in ("last-week", "last-year", "last-month", "this-week", "this-year", "this-month"):
        command = click.option(
            f"--{flag}", is_flag=True, help=f"Only expenses dated {flag.replace('-', ' ')}"
        )(command)
    command = click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")(command)
    command = click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")(command)
    return command


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    selected = [period for period, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo("Error: Only one period option can be specified at a time.", err=True)
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo(
            "Error: Period options cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0])

    start = None
    end = None
    for label, raw in (("start", start_date), ("end", end_date)):
        if not raw:
            continue
        try:
            parsed = parse_date(raw)
        except ValueError as e:
            click.echo(f"Error: Invalid {label} date: {e}", err=True)
            ctx.exit(1)
        if label == "start":
            start = parsed
        else:
            end = parsed

    return start, end
