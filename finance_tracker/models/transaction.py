"""
Core Data Models for Finance Tracker

These models define the strict schemas for all data flowing through the system.
They are designed to:
1. Enforce type safety at runtime
2. Be immutable once a transaction is recorded
3. Serialize to exactly the persisted JSON layout

DESIGN DECISION: The Python attribute names (kind, timestamp) differ from
the persisted keys (transaction_type, time_stamp). Aliases keep the file
format stable while the code reads naturally.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# RFC3339 writers with nanosecond precision emit up to 9 fraction digits
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")

NO_TRANSACTIONS_MESSAGE = "No transactions recorded."


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """
    Whether a transaction increases or decreases the balance.

    The sign of the effect comes from this value, never from the
    stored amount.
    """
    INCOME = "Income"
    EXPENSE = "Expense"


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    One recorded financial event.

    CRITICAL: Transactions are frozen. The ledger creates them and
    nothing modifies them afterwards.

    The amount is deliberately unconstrained: zero and negative values
    are stored as given. Only non-finite numbers are refused because
    they have no JSON representation.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(
        ...,
        ge=1,
        strict=True,
        description="Sequential identifier, unique within a ledger"
    )
    amount: float = Field(
        ...,
        allow_inf_nan=False,
        strict=True,
        description="Amount of money moved"
    )
    category: str = Field(
        ...,
        strict=True,
        description="Free-form category label (e.g. Salary, Groceries)"
    )
    kind: TransactionType = Field(
        ...,
        alias="transaction_type",
        description="Income or Expense"
    )
    timestamp: datetime = Field(
        ...,
        alias="time_stamp",
        description="When the transaction was recorded (UTC)"
    )
    description: str = Field(
        ...,
        strict=True,
        description="Free-form note, may be empty"
    )

    @field_validator('timestamp', mode='before')
    @classmethod
    def truncate_fraction(cls, v: Any) -> Any:
        """Drop sub-microsecond digits that datetime cannot hold."""
        if isinstance(v, str):
            return _EXCESS_FRACTION.sub(r"\1", v)
        if not isinstance(v, datetime):
            raise ValueError("time_stamp must be an ISO-8601 string")
        return v

    @field_validator('timestamp')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken as UTC; others are converted to it."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


# =============================================================================
# DISPLAY MODELS
# =============================================================================

class TransactionView(BaseModel):
    """A transaction shaped for display, with the amount pre-formatted."""

    id: int
    amount: str = Field(
        ...,
        description="Amount with exactly two decimal places"
    )
    category: str
    kind: TransactionType
    timestamp: datetime
    description: str

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionView":
        return cls(
            id=transaction.id,
            amount=f"{transaction.amount:.2f}",
            category=transaction.category,
            kind=transaction.kind,
            timestamp=transaction.timestamp,
            description=transaction.description,
        )

    def format_line(self) -> str:
        """Render as a single menu output line."""
        return (
            f"ID: {self.id}, Amount: {self.amount}, Category: {self.category}, "
            f"Type: {self.kind.value}, Time: {self.timestamp.isoformat()}, "
            f"Description: {self.description}"
        )


class TransactionListing(BaseModel):
    """
    Result of listing the ledger.

    An empty ledger is reported with data_found=False and a message,
    so callers can tell "nothing recorded yet" apart from an empty render.
    """

    data_found: bool = Field(
        ...,
        description="Was anything recorded?"
    )
    entries: list[TransactionView] = Field(
        default_factory=list,
        description="All transactions in insertion order"
    )
    message: Optional[str] = Field(
        default=None,
        description="Human-readable note when no data was found"
    )

    @property
    def result_count(self) -> int:
        """Number of listed transactions."""
        return len(self.entries)

    @classmethod
    def empty(cls) -> "TransactionListing":
        return cls(data_found=False, message=NO_TRANSACTIONS_MESSAGE)

    def lines(self) -> list[str]:
        """Lines to print for this listing."""
        if not self.data_found:
            return [self.message or NO_TRANSACTIONS_MESSAGE]
        return [entry.format_line() for entry in self.entries]
