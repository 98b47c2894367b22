"""Services package."""

from finance_tracker.services.storage import (
    CorruptDataError,
    InMemoryTransactionStorage,
    JsonFileTransactionStorage,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TransactionStorageInterface,
    load_transactions,
    save_transactions,
)

__all__ = [
    # Storage services
    "CorruptDataError",
    "InMemoryTransactionStorage",
    "JsonFileTransactionStorage",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "TransactionStorageInterface",
    "load_transactions",
    "save_transactions",
]
