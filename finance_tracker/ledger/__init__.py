"""Ledger package."""

from finance_tracker.ledger.ledger import Ledger

__all__ = ["Ledger"]
