"""
In-Memory Storage Implementation

Keeps the last saved payload as JSON bytes, so tests exercise the
same encoding and parsing as the file backend without touching disk.
"""

from typing import Optional, Sequence

from finance_tracker.models.transaction import Transaction
from finance_tracker.services.storage.interface import TransactionStorageInterface
from finance_tracker.services.storage.json_file import (
    decode_transactions,
    encode_transactions,
)


class InMemoryTransactionStorage(TransactionStorageInterface):
    """Transaction storage backed by a bytes buffer."""

    def __init__(self, payload: Optional[bytes] = None):
        self._payload = payload
        self.save_count = 0

    @property
    def location(self) -> str:
        return "memory"

    @property
    def payload(self) -> Optional[bytes]:
        """Raw JSON from the last save (None if never saved)."""
        return self._payload

    def load(self) -> list[Transaction]:
        if self._payload is None:
            return []
        return decode_transactions(self._payload, "memory")

    def save(self, transactions: Sequence[Transaction]) -> None:
        self._payload = encode_transactions(transactions)
        self.save_count += 1
