"""Memoizing front door to the analytics aggregation"""

import logging
import time
from typing import Iterable, Optional

from ledger_insights.config import settings
from ledger_insights.domain.analytics import compute_analytics
from ledger_insights.domain.coercion import parse_transactions
from ledger_insights.domain.models import AnalyticsResult, DateRange
from ledger_insights.infrastructure.cache.memo import AnalyticsCache, fingerprint
from ledger_insights.infrastructure.observability.logging import log_analytics
from ledger_insights.infrastructure.observability.metrics import record_analytics

logger = logging.getLogger(__name__)


class AnalyticsEngine:
    """Runs compute_analytics, returning the cached result for repeated snapshots"""

    def __init__(self, cache_size: int | None = None, color_strategy: str | None = None):
        self.cache = AnalyticsCache(settings.analytics_cache_size if cache_size is None else cache_size)
        self.color_strategy = color_strategy or settings.category_color_strategy

    def analyze(
        self,
        transactions: Optional[Iterable],
        date_range: DateRange,
        request_id: str = "unknown",
    ) -> AnalyticsResult:
        """
        Analytics for one (transactions, date_range) snapshot.

        Equal snapshots share one cached AnalyticsResult; it is frozen, so
        no caller can alter what the next one receives.

        Flow:
        1. Coerce records so equal content fingerprints equally
        2. Return the cached result on a fingerprint hit
        3. Otherwise compute, cache, and record metrics
        """
        start_time = time.perf_counter()
        ledger = parse_transactions(transactions)
        key = fingerprint(ledger, date_range, self.color_strategy)

        result = self.cache.get(key)
        cached = result is not None
        if cached:
            logger.debug("Analytics cache hit", extra={"request_id": request_id, "fingerprint": key})
        else:
            result = compute_analytics(ledger, date_range, self.color_strategy)
            self.cache.put(key, result)

        duration = time.perf_counter() - start_time
        record_analytics(cached, result.financial_health.score, duration)
        log_analytics(
            request_id,
            transaction_count=len(ledger),
            filtered_count=len(result.transactions),
            granularity=result.granularity,
            score=result.financial_health.score,
            cached=cached,
            duration_ms=duration * 1000,
        )
        return result


_engine: AnalyticsEngine | None = None


def get_engine() -> AnalyticsEngine:
    """Process-wide engine so the cache survives across requests"""
    global _engine
    if _engine is None:
        _engine = AnalyticsEngine()
    return _engine
