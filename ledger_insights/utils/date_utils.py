"""Date manipulation utilities"""

import math
from datetime import date, datetime, timedelta
from typing import Any, Optional

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_date(value: Any) -> Optional[date]:
    """
    Best-effort conversion to a calendar date.

    Accepts date/datetime objects and ISO strings ("2024-01-05" or
    "2024-01-05T10:30:00Z"); the time-of-day part is always dropped.
    Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < 10:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def days_between(start: date, end: date) -> int:
    """Whole days from start to end, rounded up"""
    return math.ceil((end - start) / timedelta(days=1))


def week_start(day: date) -> date:
    """Monday on or before the given day"""
    return day - timedelta(days=day.weekday())


def month_key(day: date) -> str:
    """YYYY-MM key; sorts chronologically as a plain string"""
    return f"{day.year:04d}-{day.month:02d}"


def month_label(key: str) -> str:
    """Render a YYYY-MM key as "Jan 2024" """
    year, month = key.split("-")
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {year}"


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def shift_months(day: date, months: int) -> date:
    """First day of the month `months` away from day's month"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
