"""In-memory LRU memoization of analytics results keyed by ledger content"""

import hashlib
import json
import threading
from collections import OrderedDict
from typing import Iterable, Optional

from ledger_insights.domain.models import AnalyticsResult, DateRange, Transaction


def fingerprint(transactions: Iterable[Transaction], date_range: DateRange, *extra: str) -> str:
    """
    Stable SHA-256 of the coerced ledger plus the window.

    Equal-by-value inputs give equal fingerprints regardless of object
    identity, so callers may rebuild their lists between requests.
    """
    digest = hashlib.sha256()
    digest.update(json.dumps([date_range.start.isoformat(), date_range.end.isoformat(), *extra]).encode("utf-8"))
    for txn in transactions:
        row = [
            txn.id,
            txn.date.isoformat() if txn.date else None,
            txn.amount,
            txn.type,
            txn.category,
        ]
        digest.update(b"\n")
        digest.update(json.dumps(row).encode("utf-8"))
    return digest.hexdigest()


class AnalyticsCache:
    """
    Bounded LRU of AnalyticsResult by fingerprint.

    Only the bookkeeping is locked; results are computed outside the lock.
    Stored results are shared between callers and must not be mutated.
    """

    def __init__(self, max_size: int = 128):
        self.max_size = max_size
        self._entries: "OrderedDict[str, AnalyticsResult]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[AnalyticsResult]:
        with self._lock:
            result = self._entries.get(key)
            if result is not None:
                self._entries.move_to_end(key)
            return result

    def put(self, key: str, result: AnalyticsResult) -> None:
        if self.max_size <= 0:
            return
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
