"""Unit tests for category breakdown and palette coloring"""

import pytest
from datetime import date
from ledger_insights.domain.categories import (
    CATEGORY_COLORS,
    HASH_COLORS,
    calculate_category_breakdown,
    category_color,
)
from ledger_insights.domain.models import Transaction


def _expense(txn_id: str, amount: float, category: str) -> Transaction:
    return Transaction(txn_id, date(2024, 1, 10), amount, "expense", category)


def test_breakdown_sorted_with_rank_colors():
    """Test largest category first and colors follow sorted rank"""
    transactions = [
        _expense("1", -50.0, "Coffee"),
        _expense("2", -300.0, "Rent"),
        _expense("3", -150.0, "Food"),
        _expense("4", -100.0, "Food"),
    ]

    breakdown = calculate_category_breakdown(transactions)

    assert [b.category for b in breakdown] == ["Rent", "Food", "Coffee"]
    assert [b.amount for b in breakdown] == [300.0, 250.0, 50.0]
    assert [b.color for b in breakdown] == list(CATEGORY_COLORS[:3])


def test_breakdown_percentages_sum_to_100(quarter_transactions):
    """Test percentage invariant when there are expenses"""
    breakdown = calculate_category_breakdown(quarter_transactions)

    assert sum(b.percentage for b in breakdown) == pytest.approx(100.0)
    # Rent 3600 of 4800 total expenses
    assert breakdown[0].category == "Rent"
    assert breakdown[0].percentage == pytest.approx(75.0)


def test_breakdown_ignores_income_and_transfers():
    transactions = [
        Transaction("1", date(2024, 1, 1), 1000.0, "income", "Salary"),
        Transaction("2", date(2024, 1, 2), -500.0, "transfer", "Savings"),
    ]

    assert calculate_category_breakdown(transactions) == []


def test_breakdown_zero_total_gives_zero_percentages():
    """Test divide-by-zero guard when every expense is 0"""
    breakdown = calculate_category_breakdown([_expense("1", 0.0, "Food")])

    assert breakdown[0].percentage == 0.0


def test_breakdown_blank_category_is_uncategorized():
    breakdown = calculate_category_breakdown([_expense("1", -10.0, "  "), _expense("2", -5.0, "")])

    assert len(breakdown) == 1
    assert breakdown[0].category == "Uncategorized"
    assert breakdown[0].amount == 15.0


def test_rank_colors_cycle_through_palette():
    """Test the palette wraps with rank mod palette size"""
    palette_size = len(CATEGORY_COLORS)
    transactions = [_expense(str(i), -(100.0 - i), f"Category {i}") for i in range(palette_size + 2)]

    breakdown = calculate_category_breakdown(transactions)

    assert breakdown[palette_size].color == CATEGORY_COLORS[0]
    assert breakdown[palette_size + 1].color == CATEGORY_COLORS[1]


def test_rank_color_changes_when_rank_changes():
    """Test rank coloring follows position, not identity"""
    small = calculate_category_breakdown([_expense("1", -10.0, "Food"), _expense("2", -20.0, "Rent")])
    large = calculate_category_breakdown([_expense("1", -30.0, "Food"), _expense("2", -20.0, "Rent")])

    food_small = next(b for b in small if b.category == "Food")
    food_large = next(b for b in large if b.category == "Food")
    assert food_small.color != food_large.color


def test_hash_colors_are_stable_across_calls():
    """Test hash coloring keeps a category's color regardless of rank"""
    small = calculate_category_breakdown(
        [_expense("1", -10.0, "Food"), _expense("2", -20.0, "Rent")], HASH_COLORS
    )
    large = calculate_category_breakdown(
        [_expense("1", -30.0, "Food"), _expense("2", -20.0, "Rent")], HASH_COLORS
    )

    food_small = next(b for b in small if b.category == "Food")
    food_large = next(b for b in large if b.category == "Food")
    assert food_small.color == food_large.color == category_color("Food", 0, HASH_COLORS)
    assert food_small.color in CATEGORY_COLORS
