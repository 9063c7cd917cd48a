"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from ledger_insights.api.main import create_app
from ledger_insights.api.dependencies import get_analytics_engine
from ledger_insights.domain.models import DateRange, Transaction
from ledger_insights.engine import AnalyticsEngine


@pytest.fixture
def engine() -> AnalyticsEngine:
    """Fresh engine with its own cache"""
    return AnalyticsEngine(cache_size=16, color_strategy="rank")


@pytest.fixture
def client(engine: AnalyticsEngine) -> TestClient:
    """Create FastAPI test client with an isolated analytics engine"""
    app = create_app()
    app.dependency_overrides[get_analytics_engine] = lambda: engine
    return TestClient(app)


@pytest.fixture
def january_2024() -> DateRange:
    return DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))


@pytest.fixture
def quarter_transactions() -> list[Transaction]:
    """Three months of salary, rent, groceries and a savings transfer"""
    transactions = []

    for month in (1, 2, 3):
        transactions.append(
            Transaction(f"salary_{month}", date(2024, month, 1), 3000.0, "income", "Salary")
        )
        transactions.append(
            Transaction(f"rent_{month}", date(2024, month, 3), -1200.0, "expense", "Rent")
        )
        transactions.append(
            Transaction(f"savings_{month}", date(2024, month, 5), -500.0, "transfer", "Savings")
        )
        # Weekly groceries
        for week, day in enumerate((7, 14, 21, 28)):
            transactions.append(
                Transaction(f"groceries_{month}_{week}", date(2024, month, day), -100.0, "expense", "Groceries")
            )

    return transactions
