"""Expense breakdown by category with deterministic display colors"""

import hashlib
from typing import Dict, List

from ledger_insights.domain.coercion import coerce_category
from ledger_insights.domain.models import EXPENSE, CategoryBreakdown, Transaction

CATEGORY_COLORS = (
    "#5A67D8", "#FA8072", "#4A54B3", "#E5675A", "#8B96E5",
    "#8884d8", "#82ca9d", "#ffc658", "#ff7c7c", "#8dd1e1",
    "#d084d0", "#ffb347", "#87ceeb", "#dda0dd", "#98fb98",
)

RANK_COLORS = "rank"
HASH_COLORS = "hash"


def category_color(category: str, rank: int, strategy: str = RANK_COLORS) -> str:
    """
    Palette entry for a category.

    "rank" cycles the palette by sorted position, so a category's color can
    change when other totals reorder it. "hash" keys the palette on the label
    itself and stays stable across calls.
    """
    if strategy == HASH_COLORS:
        digest = hashlib.sha256(category.encode("utf-8")).digest()
        index = int.from_bytes(digest[:4], "big")
    else:
        index = rank
    return CATEGORY_COLORS[index % len(CATEGORY_COLORS)]


def calculate_category_breakdown(
    transactions: List[Transaction],
    color_strategy: str = RANK_COLORS,
) -> List[CategoryBreakdown]:
    """Expense totals per category, largest first, with percentage of all expenses"""
    category_totals: Dict[str, float] = {}
    total_expenses = 0.0

    for txn in transactions:
        if txn.type != EXPENSE:
            continue
        category = coerce_category(txn.category)
        amount = abs(txn.amount)
        category_totals[category] = category_totals.get(category, 0.0) + amount
        total_expenses += amount

    # sorted() is stable: equal totals keep first-seen order
    ranked = sorted(category_totals.items(), key=lambda item: item[1], reverse=True)

    return [
        CategoryBreakdown(
            category=category,
            amount=amount,
            percentage=(amount / total_expenses) * 100 if total_expenses > 0 else 0.0,
            color=category_color(category, rank, color_strategy),
        )
        for rank, (category, amount) in enumerate(ranked)
    ]
