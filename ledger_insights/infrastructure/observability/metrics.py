"""Prometheus metrics for monitoring analytics volume, cache efficiency, and health scores"""

from prometheus_client import Counter, Histogram

from ledger_insights.domain.health import determine_health_status

# Analytics metrics
analytics_counter = Counter(
    "ledger_analytics_total",
    "Total analytics snapshots served",
    ["outcome"],  # computed | cached
)

analytics_duration_histogram = Histogram(
    "ledger_analytics_duration_seconds",
    "Time spent computing analytics (cache misses only)",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

health_status_counter = Counter(
    "ledger_health_status",
    "Financial health scores issued by status band",
    ["status"],  # Excellent | Good | Fair | Needs Improvement
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analytics(cached: bool, score: int, duration_seconds: float) -> None:
    """Record analytics metrics for monitoring cache hit rate and score distribution"""
    outcome = "cached" if cached else "computed"
    analytics_counter.labels(outcome=outcome).inc()

    if not cached:
        analytics_duration_histogram.observe(duration_seconds)

    health_status_counter.labels(status=determine_health_status(score)).inc()
