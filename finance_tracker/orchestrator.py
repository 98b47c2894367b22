"""
Main Orchestrator for Finance Tracker

This module ties together the ledger, storage and audit logger and
defines the one mutating flow:

    add transaction → save whole ledger → audit

DESIGN DECISION: All state lives in an explicit LedgerSession object
that the menu loop is handed. There is no module-level ledger.

Storage failures are audited and re-raised. The orchestrator never
exits the process; that decision belongs to the entry point.
"""

from typing import Optional

from finance_tracker.audit import AuditLogger
from finance_tracker.config import LedgerSettings, get_settings
from finance_tracker.ledger import Ledger
from finance_tracker.models.transaction import (
    Transaction,
    TransactionListing,
    TransactionType,
)
from finance_tracker.services.storage import (
    JsonFileTransactionStorage,
    StorageError,
    TransactionStorageInterface,
)


class LedgerSession:
    """
    One open ledger bound to its storage.

    Flow:
    1. open → Load persisted transactions into a Ledger
    2. record → Append a transaction, then save the full sequence
    3. read → Balance and listings come straight from the Ledger

    Every record is saved immediately; there is no unsaved state
    between menu commands.
    """

    def __init__(
        self,
        ledger: Ledger,
        storage: TransactionStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._ledger = ledger
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()

    @classmethod
    def open(
        cls,
        storage: TransactionStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ) -> "LedgerSession":
        """
        Load persisted transactions and start a session.

        Raises:
            StorageError: If existing data cannot be read or parsed
        """
        audit_logger = audit_logger or AuditLogger()

        try:
            transactions = storage.load()
        except StorageError as e:
            audit_logger.log_storage_failed("load", storage.location, e)
            raise

        audit_logger.log_ledger_loaded(storage.location, len(transactions))
        return cls(Ledger.from_transactions(transactions), storage, audit_logger)

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def storage(self) -> TransactionStorageInterface:
        return self._storage

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    def record(
        self,
        amount: float,
        category: str,
        kind: TransactionType,
        description: str = "",
    ) -> Transaction:
        """
        Add a transaction and persist the whole ledger.

        Raises:
            StorageWriteError: If saving fails. The transaction stays
                in the in-memory ledger.
        """
        transaction = self._ledger.add_transaction(
            amount=amount,
            category=category,
            kind=kind,
            description=description,
        )
        self._audit_logger.log_transaction_added(transaction)
        self.save()
        return transaction

    def save(self) -> None:
        """Write the full transaction sequence to storage."""
        try:
            self._storage.save(self._ledger.transactions)
        except StorageError as e:
            self._audit_logger.log_storage_failed("save", self._storage.location, e)
            raise

        self._audit_logger.log_ledger_saved(self._storage.location, len(self._ledger))

    def total_balance(self) -> float:
        return self._ledger.total_balance()

    def list_transactions(self) -> TransactionListing:
        return self._ledger.list_transactions()


def create_session(
    settings: Optional[LedgerSettings] = None,
    storage: Optional[TransactionStorageInterface] = None,
) -> LedgerSession:
    """
    Factory function to create a session from configuration.

    Args:
        settings: Application settings; defaults to get_settings().
        storage: Storage backend; defaults to the configured JSON file.

    Raises:
        StorageError: If the configured ledger file cannot be loaded
    """
    settings = settings or get_settings()
    storage = storage or JsonFileTransactionStorage(
        settings.data_file,
        indent=settings.json_indent,
    )
    return LedgerSession.open(storage)
