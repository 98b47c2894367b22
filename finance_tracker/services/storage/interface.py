"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Swap the JSON file for a real database later
2. Use in-memory storage for testing
3. Keep the ledger decoupled from where its data lives

The interface is intentionally tiny: the whole transaction sequence is
loaded once and saved in full after every change.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from finance_tracker.models.transaction import Transaction


class TransactionStorageInterface(ABC):
    """
    Abstract interface for transaction storage.

    Any storage implementation (JSON file, SQLite, etc.)
    must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Where the data lives, for log and error messages."""
        pass

    @abstractmethod
    def load(self) -> list[Transaction]:
        """
        Load every persisted transaction.

        Returns:
            Transactions in insertion order; an empty list when
            nothing has been persisted yet

        Raises:
            StorageReadError: If existing data cannot be read
            CorruptDataError: If existing data cannot be parsed
        """
        pass

    @abstractmethod
    def save(self, transactions: Sequence[Transaction]) -> None:
        """
        Replace all persisted data with the given transactions.

        Args:
            transactions: The full transaction sequence, in order

        Raises:
            StorageWriteError: If the data cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """Persisted data exists but could not be opened or read."""
    pass


class CorruptDataError(StorageError):
    """Persisted data was read but is not a valid transaction list."""
    pass


class StorageWriteError(StorageError):
    """Transactions could not be serialized or written."""
    pass
