"""Unit tests for range filtering and granularity selection"""

from datetime import date
from ledger_insights.domain.filtering import (
    DAILY,
    MONTHLY,
    WEEKLY,
    bucket_key,
    filter_by_range,
    select_granularity,
)
from ledger_insights.domain.models import DateRange, Transaction


def test_filter_by_range_inclusive_bounds(january_2024: DateRange):
    """Test both window ends are kept and neighbours dropped"""
    transactions = [
        Transaction("before", date(2023, 12, 31), 10.0, "income"),
        Transaction("first", date(2024, 1, 1), 10.0, "income"),
        Transaction("last", date(2024, 1, 31), 10.0, "income"),
        Transaction("after", date(2024, 2, 1), 10.0, "income"),
    ]

    filtered = filter_by_range(transactions, january_2024)

    assert [t.id for t in filtered] == ["first", "last"]


def test_filter_by_range_drops_undated(january_2024: DateRange):
    """Test transactions without a date never fall inside a window"""
    transactions = [
        Transaction("undated", None, 10.0, "income"),
        Transaction("dated", date(2024, 1, 10), 10.0, "income"),
    ]

    assert [t.id for t in filter_by_range(transactions, january_2024)] == ["dated"]


def test_filter_by_range_empty_result(january_2024: DateRange):
    """Test an empty window is a valid, empty result"""
    assert filter_by_range([], january_2024) == []
    assert filter_by_range([Transaction("x", date(2020, 1, 1), 1.0, "income")], january_2024) == []


def test_select_granularity_boundaries():
    """Test 31 and 180 days are the inclusive cut-offs"""
    start = date(2024, 1, 1)

    assert select_granularity(DateRange(start, date(2024, 1, 1))) == DAILY
    assert select_granularity(DateRange(start, date(2024, 2, 1))) == DAILY  # 31 days
    assert select_granularity(DateRange(start, date(2024, 2, 2))) == WEEKLY  # 32 days
    assert select_granularity(DateRange(start, date(2024, 6, 29))) == WEEKLY  # 180 days
    assert select_granularity(DateRange(start, date(2024, 6, 30))) == MONTHLY  # 181 days
    assert select_granularity(DateRange(start, date(2024, 12, 31))) == MONTHLY


def test_select_granularity_inverted_range_is_daily():
    """Test start after end is not rejected"""
    assert select_granularity(DateRange(date(2024, 3, 1), date(2024, 1, 1))) == DAILY


def test_bucket_key_formats():
    """Test daily, weekly (Monday) and monthly keys"""
    wednesday = date(2024, 1, 10)

    assert bucket_key(wednesday, DAILY) == "2024-01-10"
    assert bucket_key(wednesday, WEEKLY) == "2024-01-08"
    assert bucket_key(wednesday, MONTHLY) == "2024-01"


def test_weekly_bucket_anchors_to_monday_on_or_before():
    """Test Sunday belongs to the preceding Monday and Monday to itself"""
    assert bucket_key(date(2024, 1, 14), WEEKLY) == "2024-01-08"  # Sunday
    assert bucket_key(date(2024, 1, 15), WEEKLY) == "2024-01-15"  # Monday
    assert bucket_key(date(2024, 1, 1), WEEKLY) == "2024-01-01"  # Monday, new year
    assert bucket_key(date(2023, 1, 1), WEEKLY) == "2022-12-26"  # Sunday, crosses year
