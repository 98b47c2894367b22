"""
Audit Models for Finance Tracker

Every change to the ledger and every trip to storage is logged.
This provides:
1. Traceability of what was recorded and when
2. Debugging information when the ledger file goes bad
3. A history that survives even if the file is overwritten

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from finance_tracker.models.transaction import Transaction, utc_now


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LEDGER_SAVED = "ledger_saved"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"

    # Ledger changes
    TRANSACTION_ADDED = "transaction_added"

    # User input
    INVALID_INPUT = "invalid_input"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'ledger_file')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Identifier of the entity (transaction id or file path)"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one menu session)"
    )

    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.ledger_loaded(location, count, correlation_id)
        event = AuditEventBuilder.transaction_added(transaction, correlation_id)
    """

    @staticmethod
    def ledger_loaded(
        location: str,
        transaction_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            entity_type="ledger_file",
            entity_id=location,
            correlation_id=correlation_id,
            description=f"Loaded {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def ledger_saved(
        location: str,
        transaction_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            entity_type="ledger_file",
            entity_id=location,
            correlation_id=correlation_id,
            description=f"Saved {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def transaction_added(
        transaction: Transaction,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=str(transaction.id),
            correlation_id=correlation_id,
            description=(
                f"{transaction.kind.value} recorded: "
                f"{transaction.category} - {transaction.amount:.2f}"
            ),
            details={
                "amount": transaction.amount,
                "category": transaction.category,
                "transaction_type": transaction.kind.value,
            },
            is_user_action=True,
        )

    @staticmethod
    def storage_failed(
        operation: str,
        location: str,
        error: Exception,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        event_type = (
            AuditEventType.LOAD_FAILED
            if operation == "load"
            else AuditEventType.SAVE_FAILED
        )
        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.ERROR,
            entity_type="ledger_file",
            entity_id=location,
            correlation_id=correlation_id,
            description=f"Ledger {operation} failed",
            error_type=type(error).__name__,
            error_message=str(error),
        )

    @staticmethod
    def invalid_input(
        field: str,
        value: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_INPUT,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Rejected input for {field}",
            details={
                "field": field,
                "value": value,
            },
            is_user_action=True,
        )
