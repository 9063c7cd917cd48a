"""POST /v1/analytics - dashboard analytics for a ledger snapshot"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request

from ledger_insights.api.dependencies import get_analytics_engine, get_request_id
from ledger_insights.api.v1.schemas import AnalyticsRequest, AnalyticsResponse
from ledger_insights.config import settings
from ledger_insights.domain.exceptions import UnknownPeriodError
from ledger_insights.domain.models import DateRange
from ledger_insights.domain.periods import range_for_period
from ledger_insights.engine import AnalyticsEngine

router = APIRouter()


def resolve_date_range(request_body: AnalyticsRequest) -> DateRange:
    """Explicit range first, then the named preset, then the configured default preset"""
    if request_body.date_range is not None:
        return DateRange(start=request_body.date_range.start, end=request_body.date_range.end)
    return range_for_period(request_body.period or settings.default_period)


@router.post("/analytics", response_model=AnalyticsResponse)
def create_analytics(
    request_body: AnalyticsRequest,
    request: Request,
    engine: AnalyticsEngine = Depends(get_analytics_engine),
):
    """
    Aggregate a ledger snapshot into every dashboard view.

    Flow:
    1. Resolve the window (explicit range, preset, or default preset)
    2. Run the memoized engine over the posted records
    3. Return trends, breakdown, summaries, cash flow and health score
    """
    request_id = get_request_id(request)

    try:
        date_range = resolve_date_range(request_body)
    except UnknownPeriodError as e:
        logging.warning(f"Unknown period: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    records = [txn.model_dump() for txn in request_body.transactions]
    result = engine.analyze(records, date_range, request_id=request_id)

    return AnalyticsResponse.model_validate(asdict(result))
