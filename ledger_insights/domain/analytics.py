"""Analytics aggregation engine - core transformation from ledger to dashboard data"""

from typing import Iterable, Optional

from ledger_insights.domain.categories import RANK_COLORS, calculate_category_breakdown
from ledger_insights.domain.coercion import parse_transactions
from ledger_insights.domain.filtering import filter_by_range, select_granularity
from ledger_insights.domain.health import assess_financial_health, calculate_totals, empty_health_metrics
from ledger_insights.domain.models import AnalyticsResult, DateRange
from ledger_insights.domain.summaries import calculate_cash_flow, calculate_monthly_summaries
from ledger_insights.domain.trends import calculate_spending_trends


def empty_result(date_range: DateRange) -> AnalyticsResult:
    """Well-typed all-zero result for an empty ledger"""
    return AnalyticsResult(
        transactions=(),
        date_range=date_range,
        granularity=select_granularity(date_range),
        spending_trends=(),
        category_breakdown=(),
        monthly_summaries=(),
        cash_flow=(),
        financial_health=empty_health_metrics(),
    )


def compute_analytics(
    transactions: Optional[Iterable],
    date_range: DateRange,
    color_strategy: str = RANK_COLORS,
) -> AnalyticsResult:
    """
    Main entry point: derive every dashboard view from one ledger snapshot.

    Accepts Transaction instances or raw record mappings. Never raises on bad
    records: amounts coerce to 0, categories to "Uncategorized", undated
    transactions fall outside every window. An empty or missing ledger yields
    the empty result (score 0, no recommendations); a non-empty ledger with
    nothing inside the window is still scored, from zero totals.
    """
    ledger = parse_transactions(transactions)
    if not ledger:
        return empty_result(date_range)

    filtered = filter_by_range(ledger, date_range)
    granularity = select_granularity(date_range)
    total_income, total_expenses = calculate_totals(filtered)

    return AnalyticsResult(
        transactions=tuple(filtered),
        date_range=date_range,
        granularity=granularity,
        spending_trends=tuple(calculate_spending_trends(filtered, granularity)),
        category_breakdown=tuple(calculate_category_breakdown(filtered, color_strategy)),
        monthly_summaries=tuple(calculate_monthly_summaries(filtered)),
        cash_flow=tuple(calculate_cash_flow(filtered)),
        financial_health=assess_financial_health(total_income, total_expenses),
    )
