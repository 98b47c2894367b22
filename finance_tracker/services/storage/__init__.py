"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
Currently implements a JSON file as the backend, but designed to be swappable.
"""

from finance_tracker.services.storage.interface import (
    CorruptDataError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TransactionStorageInterface,
)
from finance_tracker.services.storage.json_file import (
    JsonFileTransactionStorage,
    load_transactions,
    save_transactions,
)
from finance_tracker.services.storage.memory import InMemoryTransactionStorage

__all__ = [
    # Interfaces
    "TransactionStorageInterface",
    # Exceptions
    "CorruptDataError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # JSON file implementation
    "JsonFileTransactionStorage",
    "load_transactions",
    "save_transactions",
    # In-memory implementation
    "InMemoryTransactionStorage",
]
