"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from ledger_insights.engine import AnalyticsEngine, get_engine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_analytics_engine() -> AnalyticsEngine:
    """Provide the shared memoizing analytics engine"""
    return get_engine()
