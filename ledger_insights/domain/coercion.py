"""Shallow coercion of upstream ledger records into Transaction values.

Ingestion has already validated records; this layer only smooths over
missing or oddly-typed fields so the aggregation never raises.
"""

import math
from typing import Any, Iterable, List, Mapping, Optional

from ledger_insights.domain.models import Transaction, UNCATEGORIZED
from ledger_insights.utils.date_utils import parse_date


def coerce_amount(value: Any) -> float:
    """Numbers and numeric strings pass through; everything else is 0.0"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def coerce_category(value: Any) -> str:
    if value is None:
        return UNCATEGORIZED
    label = str(value).strip()
    return label or UNCATEGORIZED


def _first_present(record: Mapping[str, Any], *keys: str) -> Optional[Any]:
    # Statement imports use the prefixed column names, manual entries the short ones
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def parse_transaction(record: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from a raw record (dict or pydantic dump)"""
    raw_id = record.get("id")
    raw_type = _first_present(record, "transaction_type", "type")

    return Transaction(
        id="" if raw_id is None else str(raw_id),
        date=parse_date(_first_present(record, "transaction_date", "date")),
        amount=coerce_amount(record.get("amount")),
        type="" if raw_type is None else str(raw_type).strip().lower(),
        category=coerce_category(_first_present(record, "category_name", "category")),
    )


def parse_transactions(records: Optional[Iterable[Any]]) -> List[Transaction]:
    """Coerce a ledger; Transaction instances are kept as-is, non-mappings are skipped"""
    if not records:
        return []

    transactions = []
    for record in records:
        if isinstance(record, Transaction):
            transactions.append(record)
        elif isinstance(record, Mapping):
            transactions.append(parse_transaction(record))
    return transactions
