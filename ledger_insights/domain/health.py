"""Financial health scoring - reduces income/expense totals to a 0-100 score"""

from typing import List, Tuple

from ledger_insights.domain.models import EXPENSE, INCOME, FinancialHealthMetrics, Transaction

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

RECOMMEND_SAVINGS = "Increase your savings rate to at least 10%"
RECOMMEND_REDUCE_EXPENSES = "Reduce expenses to improve financial health"
RECOMMEND_BUDGET = "Consider creating a detailed budget plan"


def calculate_totals(transactions: List[Transaction]) -> Tuple[float, float]:
    """Total income (signed) and total expenses (absolute) over the window"""
    total_income = sum(t.amount for t in transactions if t.type == INCOME)
    total_expenses = sum(abs(t.amount) for t in transactions if t.type == EXPENSE)
    return float(total_income), float(total_expenses)


def calculate_rates(total_income: float, total_expenses: float) -> Tuple[float, float]:
    """
    Savings rate and expense ratio, both in percent.

    Both are 0 without positive income rather than infinite.
    """
    if total_income <= 0:
        return 0.0, 0.0
    savings_rate = (total_income - total_expenses) / total_income * 100
    expense_ratio = total_expenses / total_income * 100
    return savings_rate, expense_ratio


def calculate_health_score(savings_rate: float, expense_ratio: float) -> int:
    """
    Score from 0 (worst) to 100 (best).

    Adjustments to the base of 50:
    - savings rate: +20 above 20%, +10 above 10%, -20 below 0%
    - expense ratio: +15 below 80%, -15 above 100%
    """
    score = BASE_SCORE

    if savings_rate > 20:
        score += 20
    elif savings_rate > 10:
        score += 10
    elif savings_rate < 0:
        score -= 20

    if expense_ratio < 80:
        score += 15
    elif expense_ratio > 100:
        score -= 15

    return max(MIN_SCORE, min(MAX_SCORE, score))


def build_recommendations(score: int, savings_rate: float, expense_ratio: float) -> List[str]:
    """Advice strings, each triggered independently, in fixed order"""
    recommendations = []
    if savings_rate < 10:
        recommendations.append(RECOMMEND_SAVINGS)
    if expense_ratio > 90:
        recommendations.append(RECOMMEND_REDUCE_EXPENSES)
    if score < 60:
        recommendations.append(RECOMMEND_BUDGET)
    return recommendations


def determine_health_status(score: int) -> str:
    """
    Map score to the dashboard's status band.

    - 80+:     Excellent
    - 60 - 80: Good
    - 40 - 60: Fair
    - < 40:    Needs Improvement
    """
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Fair"
    else:
        return "Needs Improvement"


def assess_financial_health(total_income: float, total_expenses: float) -> FinancialHealthMetrics:
    """Score two totals; deterministic and stateless"""
    savings_rate, expense_ratio = calculate_rates(total_income, total_expenses)
    score = calculate_health_score(savings_rate, expense_ratio)

    return FinancialHealthMetrics(
        score=score,
        savings_rate=savings_rate,
        expense_ratio=expense_ratio,
        status=determine_health_status(score),
        recommendations=tuple(build_recommendations(score, savings_rate, expense_ratio)),
    )


def empty_health_metrics() -> FinancialHealthMetrics:
    """Metrics for an empty ledger"""
    return FinancialHealthMetrics(
        score=MIN_SCORE,
        savings_rate=0.0,
        expense_ratio=0.0,
        status=determine_health_status(MIN_SCORE),
    )
