"""Monthly income/expense summaries and the chained cash-flow projection"""

from typing import List

from ledger_insights.domain.models import CashFlowPeriod, MonthlySummary, Transaction
from ledger_insights.domain.trends import accumulate_flows
from ledger_insights.utils.date_utils import month_key, month_label


def calculate_monthly_summaries(transactions: List[Transaction]) -> List[MonthlySummary]:
    """
    Income vs expenses per calendar month, oldest first.

    Ordered by YYYY-MM key; labels like "Jan 2025" are rendered afterwards
    because they do not sort chronologically across years.
    """
    totals = accumulate_flows(transactions, month_key)

    return [
        MonthlySummary(
            month_key=key,
            month_label=month_label(key),
            income=totals[key][0],
            expenses=totals[key][1],
            net=totals[key][0] - totals[key][1],
        )
        for key in sorted(totals)
    ]


def calculate_cash_flow(transactions: List[Transaction]) -> List[CashFlowPeriod]:
    """
    Thread a running balance through the months of the window.

    Balances are relative: the first month starts at 0, each later month
    starts where the previous one ended.
    """
    totals = accumulate_flows(transactions, month_key)

    periods = []
    running_balance = 0.0
    for key in sorted(totals):
        income, expenses = totals[key]
        starting_balance = running_balance
        net_change = income - expenses
        ending_balance = starting_balance + net_change
        running_balance = ending_balance

        periods.append(
            CashFlowPeriod(
                period_key=key,
                period_label=month_label(key),
                starting_balance=starting_balance,
                income=income,
                expenses=expenses,
                ending_balance=ending_balance,
                net_change=net_change,
            )
        )

    return periods
