"""Spending trend aggregation - bucketed income/expenses with a running balance"""

from typing import Dict, List

from ledger_insights.domain.filtering import bucket_key
from ledger_insights.domain.models import EXPENSE, INCOME, Transaction, TrendPoint


def accumulate_flows(transactions: List[Transaction], key_func) -> Dict[str, List[float]]:
    """
    Sum income and expenses per key.

    Returns {key: [income, expenses]} in first-seen order. Income sums signed
    amounts, expenses sum absolute amounts, transfers count toward neither
    (but still open their bucket).
    """
    totals: Dict[str, List[float]] = {}
    for txn in transactions:
        if txn.date is None:
            continue
        bucket = totals.setdefault(key_func(txn.date), [0.0, 0.0])
        if txn.type == INCOME:
            bucket[0] += txn.amount
        elif txn.type == EXPENSE:
            bucket[1] += abs(txn.amount)
    return totals


def calculate_spending_trends(transactions: List[Transaction], granularity: str) -> List[TrendPoint]:
    """
    Build the trend series for already-filtered transactions.

    Two passes: aggregate per bucket, then sort by key and fold the running
    balance. Bucket insertion order follows the ledger, not the calendar, so
    the fold must happen after sorting.
    """
    totals = accumulate_flows(transactions, lambda day: bucket_key(day, granularity))

    points = []
    running_balance = 0.0
    for key in sorted(totals):
        income, expenses = totals[key]
        net_flow = income - expenses
        running_balance += net_flow
        points.append(
            TrendPoint(
                bucket_key=key,
                income=income,
                expenses=expenses,
                net_flow=net_flow,
                running_balance=running_balance,
            )
        )

    return points
