"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON file is the storage backend because:
1. The user can read and back up their data with any text editor
2. No database setup required
3. The data set of a personal ledger is small

TRADEOFFS:
- The file is rewritten in full on every save (truncate, then write)
- No atomic rename: a crash mid-write can leave a broken file
- No locking: one process owns the file at a time

A missing file is the normal first-run state and loads as an empty
ledger. Anything else that goes wrong surfaces as a StorageError;
deciding whether to abort is left to the caller.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from finance_tracker.models.transaction import Transaction
from finance_tracker.services.storage.interface import (
    CorruptDataError,
    StorageReadError,
    StorageWriteError,
    TransactionStorageInterface,
)


# Shared by the file and in-memory backends
TRANSACTION_LIST = TypeAdapter(list[Transaction])


def decode_transactions(data: Union[str, bytes], source: str) -> list[Transaction]:
    """Parse a JSON array of transaction records."""
    try:
        return TRANSACTION_LIST.validate_json(data)
    except ValidationError as e:
        raise CorruptDataError(
            f"Unable to parse transactions from {source}: {e}"
        ) from e


def encode_transactions(
    transactions: Sequence[Transaction],
    indent: Optional[int] = None,
) -> bytes:
    """Serialize transactions to a JSON array using the persisted key names."""
    try:
        return TRANSACTION_LIST.dump_json(
            list(transactions),
            by_alias=True,
            indent=indent,
        )
    except PydanticSerializationError as e:
        raise StorageWriteError(f"Unable to serialize transactions: {e}") from e


class JsonFileTransactionStorage(TransactionStorageInterface):
    """
    JSON flat-file implementation of transaction storage.

    The file holds one JSON array with one object per transaction,
    in insertion order.
    """

    def __init__(
        self,
        path: Union[str, Path],
        indent: Optional[int] = None,
    ):
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> list[Transaction]:
        if not self._path.exists():
            return []

        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise StorageReadError(f"Unable to read {self._path}: {e}") from e

        return decode_transactions(data, str(self._path))

    def save(self, transactions: Sequence[Transaction]) -> None:
        payload = encode_transactions(transactions, self._indent)

        try:
            with open(self._path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise StorageWriteError(
                f"Unable to write transactions to {self._path}: {e}"
            ) from e


def load_transactions(path: Union[str, Path]) -> list[Transaction]:
    """
    Load transactions from a JSON file.

    Returns an empty list if the file does not exist.
    """
    return JsonFileTransactionStorage(path).load()


def save_transactions(
    transactions: Sequence[Transaction],
    path: Union[str, Path],
) -> None:
    """Overwrite the JSON file at path with the given transactions."""
    JsonFileTransactionStorage(path).save(transactions)
