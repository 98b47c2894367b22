"""
Data Models Package

This package contains all Pydantic models used in the Finance Tracker.
All data flowing through the system must conform to these schemas.
"""

from finance_tracker.models.transaction import (
    NO_TRANSACTIONS_MESSAGE,
    Transaction,
    TransactionListing,
    TransactionType,
    TransactionView,
    utc_now,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "NO_TRANSACTIONS_MESSAGE",
    "Transaction",
    "TransactionListing",
    "TransactionType",
    "TransactionView",
    "utc_now",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
