"""Domain models - pure Python dataclasses representing ledger analytics entities"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

UNCATEGORIZED = "Uncategorized"

INCOME = "income"
EXPENSE = "expense"
TRANSFER = "transfer"


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction after shallow coercion"""

    id: str
    date: Optional[date]  # None when the upstream date was missing or unparsable
    amount: float  # signed; sign may disagree with type
    type: str  # "income", "expense" or "transfer"
    category: str = UNCATEGORIZED


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar window"""

    start: date
    end: date


@dataclass(frozen=True)
class TrendPoint:
    """One time bucket of the spending trend"""

    bucket_key: str
    income: float
    expenses: float
    net_flow: float
    running_balance: float


@dataclass(frozen=True)
class CategoryBreakdown:
    """Share of total expenses attributable to one category"""

    category: str
    amount: float
    percentage: float
    color: str


@dataclass(frozen=True)
class MonthlySummary:
    """Income vs expenses for one calendar month"""

    month_key: str  # YYYY-MM
    month_label: str  # e.g. "Jan 2024"
    income: float
    expenses: float
    net: float


@dataclass(frozen=True)
class CashFlowPeriod:
    """One month of the chained cash-flow projection"""

    period_key: str
    period_label: str
    starting_balance: float
    income: float
    expenses: float
    ending_balance: float
    net_change: float


@dataclass(frozen=True)
class FinancialHealthMetrics:
    """Output of the health scorer"""

    score: int
    savings_rate: float
    expense_ratio: float
    status: str
    recommendations: Tuple[str, ...] = ()
    # Reserved extension points, always 0
    category_diversification: float = 0.0
    trend_stability: float = 0.0


@dataclass(frozen=True)
class AnalyticsResult:
    """
    Everything derived from one (transactions, date_range) snapshot.

    Frozen with tuple collections: the engine hands the same cached instance
    to every caller with an equal snapshot.
    """

    transactions: Tuple[Transaction, ...]
    date_range: DateRange
    granularity: str
    spending_trends: Tuple[TrendPoint, ...]
    category_breakdown: Tuple[CategoryBreakdown, ...]
    monthly_summaries: Tuple[MonthlySummary, ...]
    cash_flow: Tuple[CashFlowPeriod, ...]
    financial_health: FinancialHealthMetrics
