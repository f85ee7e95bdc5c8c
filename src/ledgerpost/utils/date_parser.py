"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "last-month", "this-year", "last-year", "this-week", "last-week")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday", "tomorrow" and any absolute date that
    dateutil understands ("2025-01-15", "15 Jan 2025", ...).

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = (date_str or "").strip().lower()
    today = today or date.today()

    relative = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative:
        return relative[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from None


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Return (start, end) for a named period such as this-month or last-year.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "last-month":
        start = (today - relativedelta(months=1)).replace(day=1)
        return start, today.replace(day=1) - timedelta(days=1)
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "last-year":
        start = today.replace(month=1, day=1) - relativedelta(years=1)
        return start, today.replace(month=1, day=1) - timedelta(days=1)
    if period == "this-week":
        return today - timedelta(days=today.weekday()), today
    if period == "last-week":
        start = today - timedelta(days=today.weekday() + 7)
        return start, start + timedelta(days=6)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
