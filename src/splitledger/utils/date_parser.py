"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms "today", "yesterday", "tomorrow" and
    "last/this/next week|month|year" (each resolving to the first day of the
    period).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    fixed = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in fixed:
        return fixed[text]

    offsets = {"last": -1, "this": 0, "next": 1}
    parts = text.split()
    if len(parts) == 2 and parts[0] in offsets:
        step = offsets[parts[0]]
        if parts[1] == "week":
            return _start_of_week(today) + timedelta(weeks=step)
        if parts[1] == "month":
            return today.replace(day=1) + relativedelta(months=step)
        if parts[1] == "year":
            return today.replace(month=1, day=1) + relativedelta(years=step)

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    "this-*" periods end today; "last-*" periods cover the whole previous
    week, month or year.

    Args:
        period: One of PERIODS

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-week":
        return _start_of_week(today), today
    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today

    if period == "last-week":
        start = _start_of_week(today) - timedelta(weeks=1)
        return start, start + timedelta(days=6)
    if period == "last-month":
        end = today.replace(day=1) - timedelta(days=1)
        return end.replace(day=1), end
    if period == "last-year":
        start = today.replace(month=1, day=1) - relativedelta(years=1)
        return start, start.replace(month=12, day=31)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
