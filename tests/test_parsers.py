"""Tests for amount, percent and date parsing."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from splitledger.utils.amount_parser import parse_amount, parse_percent
from splitledger.utils.date_parser import get_date_range, parse_date


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("123.45", Decimal("123.45")),
            ("$123.45", Decimal("123.45")),
            ("1,234.56", Decimal("1234.56")),
            ("€ 10", Decimal("10")),
            ("(50.00)", Decimal("-50.00")),
            ("-7", Decimal("-7")),
            (42, Decimal("42")),
            (0.1, Decimal("0.1")),
            (Decimal("3.3"), Decimal("3.3")),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_amount(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "abc",
            "1.2.3",
            "NaN",
            "inf",
            True,
            None,
            [5],
            {"amount": 5},
            float("nan"),
            float("inf"),
            Decimal("NaN"),
            Decimal("-Infinity"),
        ],
    )
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_amount(value)


class TestParsePercent:
    """Tests for parse_percent."""

    @pytest.mark.parametrize(
        "value,expected",
        [("25", Decimal("25")), ("25%", Decimal("25")), ("12.5 %", Decimal("12.5")), (40, Decimal("40"))],
    )
    def test_valid(self, value, expected):
        assert parse_percent(value) == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match="percent"):
            parse_percent("half")

    @pytest.mark.parametrize("value", [[25], {"percent": 25}, float("nan")])
    def test_non_scalar_or_non_finite(self, value):
        with pytest.raises(ValueError, match="percent"):
            parse_percent(value)


class TestParseDate:
    """Tests for parse_date."""

    def test_absolute(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_relative_days(self):
        today = date.today()
        assert parse_date("today") == today
        assert parse_date("Yesterday") == today - timedelta(days=1)
        assert parse_date("tomorrow") == today + timedelta(days=1)

    def test_relative_periods(self):
        today = date.today()
        monday = today - timedelta(days=today.weekday())
        assert parse_date("this week") == monday
        assert parse_date("last week") == monday - timedelta(days=7)
        assert parse_date("next week") == monday + timedelta(days=7)
        assert parse_date("this month") == today.replace(day=1)
        assert parse_date("this year") == date(today.year, 1, 1)
        assert parse_date("last year") == date(today.year - 1, 1, 1)
        assert parse_date("next year") == date(today.year + 1, 1, 1)

    def test_last_month(self):
        result = parse_date("last month")
        first_of_month = date.today().replace(day=1)
        assert result.day == 1
        assert result < first_of_month
        assert (first_of_month - result).days <= 31

    def test_invalid(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("not a date")


class TestGetDateRange:
    """Tests for get_date_range."""

    def test_this_periods_end_today(self):
        today = date.today()
        for period in ("this-week", "this-month", "this-year"):
            start, end = get_date_range(period)
            assert end == today
            assert start <= today

    def test_last_week(self):
        start, end = get_date_range("last-week")
        assert start.weekday() == 0
        assert end - start == timedelta(days=6)

    def test_last_month(self):
        start, end = get_date_range("last-month")
        assert start.day == 1
        assert end + timedelta(days=1) == date.today().replace(day=1)

    def test_last_year(self):
        start, end = get_date_range("last-year")
        year = date.today().year - 1
        assert (start, end) == (date(year, 1, 1), date(year, 12, 31))

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="Unknown period"):
            get_date_range("next-decade")
