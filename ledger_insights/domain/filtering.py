"""Date-range filtering and trend bucket selection"""

from datetime import date
from typing import List

from ledger_insights.domain.models import DateRange, Transaction
from ledger_insights.utils.date_utils import days_between, month_key, week_start

DAILY = "daily"
WEEKLY = "weekly"
MONTHLY = "monthly"

# Upper bounds (inclusive) on window length for each granularity
DAILY_MAX_DAYS = 31
WEEKLY_MAX_DAYS = 180


def filter_by_range(transactions: List[Transaction], date_range: DateRange) -> List[Transaction]:
    """
    Keep transactions dated within [start, end], inclusive.

    Undated transactions are dropped. An empty result is valid output.
    """
    return [
        t for t in transactions
        if t.date is not None and date_range.start <= t.date <= date_range.end
    ]


def select_granularity(date_range: DateRange) -> str:
    """
    Pick the trend bucket width from the window length.

    Keeps a one-year view to roughly a dozen points while short windows
    keep per-day resolution.
    """
    diff_days = days_between(date_range.start, date_range.end)
    if diff_days <= DAILY_MAX_DAYS:
        return DAILY
    elif diff_days <= WEEKLY_MAX_DAYS:
        return WEEKLY
    else:
        return MONTHLY


def bucket_key(day: date, granularity: str) -> str:
    """Sortable bucket key: YYYY-MM-DD, Monday's YYYY-MM-DD, or YYYY-MM"""
    if granularity == WEEKLY:
        return week_start(day).isoformat()
    if granularity == MONTHLY:
        return month_key(day)
    return day.isoformat()
