'''
    File Name: period.py
    Version: 1.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Calendar date helpers shared by the repository and reports.
'''
import calendar
from datetime import date, datetime
from typing import Optional, Tuple, Union

DateLike = Union[date, datetime, str]

PERIOD_CHOICES = ("month", "quarter", "year", "all")


def parse_date(value: DateLike) -> date:
    """Return a calendar date for a date, datetime or 'YYYY-MM-DD' string.

    Strings are split into their calendar components so that no timezone
    ever shifts the day. A trailing time part ('2024-01-05T00:00:00Z') is
    ignored.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}. Expected YYYY-MM-DD")
    text = value.strip()[:10]
    try:
        year, month, day = (int(p) for p in text.split("-"))
        return date(year, month, day)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid date format: {value}. Expected YYYY-MM-DD")


def parse_optional_date(value: Optional[DateLike]) -> Optional[date]:
    if value is None or value == "":
        return None
    return parse_date(value)


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last calendar day of the month containing `day`."""
    last = calendar.monthrange(day.year, day.month)[1]
    return date(day.year, day.month, 1), date(day.year, day.month, last)


def add_years(day: date, years: int) -> date:
    """Same month/day `years` later; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def period_range(period: str, today: Optional[date] = None) -> Tuple[Optional[date], Optional[date]]:
    """Inclusive (start, end) for a named reporting period.

    'all' (or anything unknown) yields (None, None), i.e. no restriction.
    """
    today = today or date.today()
    if period == "month":
        return month_bounds(today)
    if period == "quarter":
        first_month = (today.month - 1) // 3 * 3 + 1
        start = date(today.year, first_month, 1)
        end = month_bounds(date(today.year, first_month + 2, 1))[1]
        return start, end
    if period == "year":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    return None, None


def in_range(day: date, start: Optional[date], end: Optional[date]) -> bool:
    """Inclusive range check; a missing bound leaves that side open."""
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True
