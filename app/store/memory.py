"""In-memory receipt store.

Scored receipts live for the lifetime of the process; there is no update or
delete. A single lock guards the mapping so the FastAPI threadpool can serve
concurrent submissions and lookups.
"""

import threading
from functools import lru_cache
from typing import Protocol

from app.models.receipt import ScoredReceipt


class ReceiptStore(Protocol):
    """Storage contract used by the receipt service."""

    def put(self, receipt_id: str, record: ScoredReceipt) -> None:
        ...

    def get(self, receipt_id: str) -> ScoredReceipt | None:
        ...


class InMemoryReceiptStore:
    """Lock-guarded dict of scored receipts keyed by identifier."""

    def __init__(self) -> None:
        self._records: dict[str, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, record: ScoredReceipt) -> None:
        with self._lock:
            self._records[receipt_id] = record

    def get(self, receipt_id: str) -> ScoredReceipt | None:
        with self._lock:
            return self._records.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


@lru_cache
def get_receipt_store() -> InMemoryReceiptStore:
    """Dependency for the process-wide receipt store."""
    return InMemoryReceiptStore()
