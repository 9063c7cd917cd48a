"""Pydantic schemas for API request/response validation"""

import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TransactionIn(BaseModel):
    """
    Loose ledger record as produced by statement ingestion.

    Every field is optional; the engine coerces what is missing. Both the
    short names and the prefixed statement-import names are accepted.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[str, int]] = None
    date: Optional[str] = None
    transaction_date: Optional[str] = None
    amount: Optional[Union[float, str]] = None
    type: Optional[str] = None
    transaction_type: Optional[str] = None
    category: Optional[str] = None
    category_name: Optional[str] = None


class DateRangeSchema(BaseModel):
    """Inclusive calendar window"""

    start: datetime.date
    end: datetime.date


class AnalyticsRequest(BaseModel):
    """Request body for POST /v1/analytics"""

    transactions: List[TransactionIn] = Field(default_factory=list, description="Ledger snapshot")
    date_range: Optional[DateRangeSchema] = Field(None, description="Explicit window; wins over period")
    period: Optional[str] = Field(None, description="Preset id: 1m, 3m, 6m or 1y")


class TransactionOut(BaseModel):
    id: str
    date: Optional[datetime.date]
    amount: float
    type: str
    category: str


class TrendPointSchema(BaseModel):
    bucket_key: str
    income: float
    expenses: float
    net_flow: float
    running_balance: float


class CategoryBreakdownSchema(BaseModel):
    category: str
    amount: float
    percentage: float
    color: str


class MonthlySummarySchema(BaseModel):
    month_key: str
    month_label: str
    income: float
    expenses: float
    net: float


class CashFlowPeriodSchema(BaseModel):
    period_key: str
    period_label: str
    starting_balance: float
    income: float
    expenses: float
    ending_balance: float
    net_change: float


class FinancialHealthSchema(BaseModel):
    score: int
    savings_rate: float
    expense_ratio: float
    status: str
    recommendations: List[str]
    category_diversification: float
    trend_stability: float


class AnalyticsResponse(BaseModel):
    """Response for POST /v1/analytics"""

    transactions: List[TransactionOut]
    date_range: DateRangeSchema
    granularity: str
    spending_trends: List[TrendPointSchema]
    category_breakdown: List[CategoryBreakdownSchema]
    monthly_summaries: List[MonthlySummarySchema]
    cash_flow: List[CashFlowPeriodSchema]
    financial_health: FinancialHealthSchema


class PeriodSchema(BaseModel):
    """Single date-range preset"""

    id: str
    label: str
    months: int
    description: str
    start: datetime.date
    end: datetime.date


class PeriodsResponse(BaseModel):
    """Response for GET /v1/periods"""

    periods: List[PeriodSchema]
