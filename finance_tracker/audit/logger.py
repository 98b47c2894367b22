"""
Audit Logger

DESIGN DECISION: Every change to the ledger and every load or save is logged.
This provides:
1. Traceability of what was recorded
2. Debugging capability when the ledger file is unreadable
3. A record of failures even when the process aborts right after

The audit logger:
- Writes structured records through structlog on top of stdlib logging
- Keeps the most recent events in memory for inspection
- Supports correlation IDs to tie together the events of one session
"""

import logging
import sys
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditSeverity,
)
from finance_tracker.models.transaction import Transaction


def configure_structlog(json_logs: bool = True) -> None:
    """Set the structlog processor chain, rendering JSON or console lines."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: int = logging.WARNING, json_logs: bool = True) -> None:
    """
    Configure structlog and the stdlib handler it writes through.

    Logs go to stderr so they never interleave with menu output.
    Only the console entry point calls this; importing the package
    leaves the root logger alone.
    """
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(level)
    configure_structlog(json_logs)


# Configure structlog for local logging
configure_structlog()


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. A bounded in-memory history (for inspection and tests)
    """

    def __init__(
        self,
        correlation_id: Optional[UUID] = None,
        history_size: int = 100,
    ):
        """
        Initialize audit logger.

        Args:
            correlation_id: Attached to every event built by this logger.
                    A fresh one is created if not given.
            history_size: How many recent events to keep in memory.
        """
        self.correlation_id = correlation_id or create_correlation_id()
        self._recent: deque[AuditEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger()

    def log(self, event: AuditEvent) -> None:
        """Log an audit event locally and remember it."""
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._recent.append(event)

    def recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """Most recent events, newest first."""
        return list(reversed(self._recent))[:limit]

    def log_ledger_loaded(self, location: str, transaction_count: int) -> None:
        """Log a successful load."""
        self.log(AuditEventBuilder.ledger_loaded(
            location=location,
            transaction_count=transaction_count,
            correlation_id=self.correlation_id,
        ))

    def log_ledger_saved(self, location: str, transaction_count: int) -> None:
        """Log a successful save."""
        self.log(AuditEventBuilder.ledger_saved(
            location=location,
            transaction_count=transaction_count,
            correlation_id=self.correlation_id,
        ))

    def log_transaction_added(self, transaction: Transaction) -> None:
        """Log a newly recorded transaction."""
        self.log(AuditEventBuilder.transaction_added(
            transaction=transaction,
            correlation_id=self.correlation_id,
        ))

    def log_storage_failed(
        self,
        operation: str,
        location: str,
        error: Exception,
    ) -> None:
        """Log a failed load or save."""
        self.log(AuditEventBuilder.storage_failed(
            operation=operation,
            location=location,
            error=error,
            correlation_id=self.correlation_id,
        ))

    def log_invalid_input(self, field: str, value: str) -> None:
        """Log rejected user input."""
        self.log(AuditEventBuilder.invalid_input(
            field=field,
            value=value,
            correlation_id=self.correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new session.
    Pass it through all subsequent operations.
    """
    return uuid4()
