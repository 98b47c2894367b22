"""Audit logging package."""

from finance_tracker.audit.logger import (
    AuditLogger,
    configure_logging,
    configure_structlog,
    create_correlation_id,
)

__all__ = [
    "AuditLogger",
    "configure_logging",
    "configure_structlog",
    "create_correlation_id",
]
