"""Tests for date parsing utilities."""

import pytest
from datetime import date, timedelta
from ledgerpost.utils.date_parser import parse_date, get_date_range

TODAY = date(2025, 3, 12)  # a Wednesday


def test_parse_absolute_date():
    assert parse_date("2025-01-15") == date(2025, 1, 15)


@pytest.mark.parametrize("text", ["January 15, 2025", "15 Jan 2025", "2025/01/15"])
def test_parse_standard_formats(text):
    assert parse_date(text) == date(2025, 1, 15)


def test_parse_relative_days():
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date(" Yesterday ", today=TODAY) == TODAY - timedelta(days=1)
    assert parse_date("tomorrow", today=TODAY) == TODAY + timedelta(days=1)


def test_parse_today_defaults_to_current_day():
    assert parse_date("today") == date.today()


def test_parse_invalid():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "period,expected",
    [
        ("this-month", (date(2025, 3, 1), TODAY)),
        ("last-month", (date(2025, 2, 1), date(2025, 2, 28))),
        ("this-year", (date(2025, 1, 1), TODAY)),
        ("last-year", (date(2024, 1, 1), date(2024, 12, 31))),
        ("this-week", (date(2025, 3, 10), TODAY)),
        ("last-week", (date(2025, 3, 3), date(2025, 3, 9))),
    ],
)
def test_get_date_range(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_year_boundary():
    assert get_date_range("last-month", today=date(2025, 1, 20)) == (
        date(2024, 12, 1),
        date(2024, 12, 31),
    )


def test_get_date_range_invalid_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
