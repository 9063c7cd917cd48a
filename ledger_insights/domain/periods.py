"""Date-range presets: the last N complete calendar months"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ledger_insights.domain.exceptions import UnknownPeriodError
from ledger_insights.domain.models import DateRange
from ledger_insights.utils.date_utils import days_between, first_of_month, shift_months


@dataclass(frozen=True)
class PeriodPreset:
    id: str
    label: str
    months: int
    description: str


PERIOD_PRESETS = (
    PeriodPreset("1m", "1M", 1, "Last Complete Month"),
    PeriodPreset("3m", "3M", 3, "Last 3 Complete Months"),
    PeriodPreset("6m", "6M", 6, "Last 6 Complete Months"),
    PeriodPreset("1y", "1Y", 12, "Last 12 Complete Months"),
)


def get_preset(period_id: str) -> PeriodPreset:
    for preset in PERIOD_PRESETS:
        if preset.id == period_id:
            return preset
    raise UnknownPeriodError(f"Unknown period '{period_id}'")


def range_for_months(months: int, today: Optional[date] = None) -> DateRange:
    """
    Window covering the last `months` complete months before today.

    Example (today = 2024-03-15, months = 3):
        2023-12-01 .. 2024-02-29
    """
    if today is None:
        today = date.today()

    current_month = first_of_month(today)
    end = current_month - timedelta(days=1)
    start = shift_months(current_month, -months)
    return DateRange(start=start, end=end)


def range_for_period(period_id: str, today: Optional[date] = None) -> DateRange:
    """Resolve a preset id ("1m", "3m", "6m", "1y") to its date range"""
    return range_for_months(get_preset(period_id).months, today)


def classify_range(date_range: DateRange) -> str:
    """Closest preset id for an arbitrary window, by length"""
    diff_days = days_between(date_range.start, date_range.end)
    if diff_days <= 35:
        return "1m"
    if diff_days <= 100:
        return "3m"
    if diff_days <= 190:
        return "6m"
    return "1y"


def list_presets(today: Optional[date] = None) -> List[Tuple[PeriodPreset, DateRange]]:
    """(preset, range) pairs for every preset, relative to today"""
    return [(preset, range_for_months(preset.months, today)) for preset in PERIOD_PRESETS]
