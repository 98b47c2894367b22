"""
Tests for Finance Tracker models

Test strategy:
1. Unit tests for individual components (models, ledger, storage)
2. Integration tests for flows (session + in-memory or tmp_path storage)
3. No real user input in tests (input() is patched)
"""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from pydantic import ValidationError

from finance_tracker.models.transaction import (
    NO_TRANSACTIONS_MESSAGE,
    Transaction,
    TransactionListing,
    TransactionType,
    TransactionView,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from finance_tracker.services.storage.json_file import TRANSACTION_LIST


def make_transaction(**overrides) -> Transaction:
    fields = {
        "id": 1,
        "amount": 100.0,
        "category": "Salary",
        "kind": TransactionType.INCOME,
        "timestamp": datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        "description": "Monthly salary",
    }
    if "time_stamp" in overrides:
        del fields["timestamp"]
    fields.update(overrides)
    return Transaction(**fields)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction creation with Python field names."""
        transaction = make_transaction()
        assert transaction.id == 1
        assert transaction.amount == 100.0
        assert transaction.kind == TransactionType.INCOME
        assert transaction.description == "Monthly salary"

    def test_transaction_accepts_persisted_keys(self):
        """Test that the JSON key names populate kind and timestamp."""
        transaction = Transaction(
            id=2,
            amount=50,
            category="Groceries",
            transaction_type="Expense",
            time_stamp="2024-05-02T18:00:00Z",
            description="Weekly groceries",
        )
        assert transaction.kind == TransactionType.EXPENSE
        assert transaction.timestamp == datetime(2024, 5, 2, 18, 0, tzinfo=timezone.utc)
        assert transaction.amount == 50.0

    def test_transaction_is_frozen(self):
        """Test that a recorded transaction cannot be modified."""
        transaction = make_transaction()
        with pytest.raises(ValidationError):
            transaction.amount = 1.0

    def test_transaction_accepts_negative_and_zero_amounts(self):
        """Test that amounts are stored as given."""
        assert make_transaction(amount=-25.5).amount == -25.5
        assert make_transaction(amount=0).amount == 0.0

    def test_transaction_rejects_non_finite_amount(self):
        """Test that NaN and infinity are refused."""
        with pytest.raises(ValidationError):
            make_transaction(amount=float("nan"))
        with pytest.raises(ValidationError):
            make_transaction(amount=float("inf"))

    def test_transaction_rejects_unknown_type(self):
        """Test that only Income and Expense are valid kinds."""
        with pytest.raises(ValidationError):
            make_transaction(kind="Transfer")

    def test_transaction_rejects_non_positive_id(self):
        """Test that ids start at 1."""
        with pytest.raises(ValidationError):
            make_transaction(id=0)

    def test_description_and_timestamp_are_required(self):
        """Test that every persisted field must be present."""
        with pytest.raises(ValidationError) as exc_info:
            Transaction(
                id=1,
                amount=1.0,
                category="Misc",
                kind=TransactionType.EXPENSE,
            )
        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"time_stamp", "description"}

    def test_empty_description_is_allowed(self):
        """Test that description may be an empty string."""
        assert make_transaction(description="").description == ""

    @pytest.mark.parametrize("field,value", [
        ("id", "1"),
        ("amount", "100"),
        ("category", 7),
        ("description", None),
    ])
    def test_fields_are_not_coerced(self, field, value):
        """Test that values of the wrong JSON type are refused."""
        with pytest.raises(ValidationError):
            make_transaction(**{field: value})

    def test_numeric_timestamp_is_rejected(self):
        """Test that epoch numbers are not accepted as time_stamp."""
        with pytest.raises(ValidationError):
            make_transaction(time_stamp=1714555800)

    def test_naive_timestamp_is_utc(self):
        """Test that a timestamp without offset is taken as UTC."""
        transaction = make_transaction(timestamp=datetime(2024, 1, 1, 12, 0))
        assert transaction.timestamp == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_offset_timestamp_is_converted_to_utc(self):
        """Test that other offsets are normalized to UTC."""
        transaction = make_transaction(time_stamp="2024-01-01T14:00:00+02:00")
        assert transaction.timestamp.utcoffset() == timedelta(0)
        assert transaction.timestamp.hour == 12

    def test_nanosecond_timestamp_is_truncated(self):
        """Test that nine fraction digits load at microsecond precision."""
        transaction = make_transaction(time_stamp="2024-05-01T09:30:00.123456789Z")
        assert transaction.timestamp.microsecond == 123456

    def test_dump_uses_persisted_layout(self):
        """Test the record written to the ledger file."""
        record = TRANSACTION_LIST.dump_python(
            [make_transaction()], mode="json", by_alias=True
        )[0]
        assert record == {
            "id": 1,
            "amount": 100.0,
            "category": "Salary",
            "transaction_type": "Income",
            "time_stamp": "2024-05-01T09:30:00Z",
            "description": "Monthly salary",
        }


class TestDisplayModels:
    """Tests for TransactionView and TransactionListing."""

    def test_view_formats_amount_with_two_decimals(self):
        """Test that display amounts always have two decimals."""
        view = TransactionView.from_transaction(make_transaction(amount=7.5))
        assert view.amount == "7.50"

    def test_view_format_line(self):
        """Test the single line shown in the menu."""
        view = TransactionView.from_transaction(make_transaction())
        assert view.format_line() == (
            "ID: 1, Amount: 100.00, Category: Salary, Type: Income, "
            "Time: 2024-05-01T09:30:00+00:00, Description: Monthly salary"
        )

    def test_empty_listing_signals_no_data(self):
        """Test that an empty listing is distinct from an empty render."""
        listing = TransactionListing.empty()
        assert listing.data_found is False
        assert listing.result_count == 0
        assert listing.lines() == [NO_TRANSACTIONS_MESSAGE]

    def test_listing_lines(self):
        """Test that a populated listing renders one line per entry."""
        listing = TransactionListing(
            data_found=True,
            entries=[TransactionView.from_transaction(make_transaction())],
        )
        assert listing.result_count == 1
        assert listing.lines()[0].startswith("ID: 1, Amount: 100.00")


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            description="Loaded 0 transactions",
        )
        assert event.event_type == AuditEventType.LEDGER_LOADED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            description="Saved 2 transactions",
            details={"transaction_count": 2},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "ledger_saved"
        assert log_dict["details"]["transaction_count"] == 2

    def test_audit_event_builder_transaction_added(self):
        """Test AuditEventBuilder.transaction_added."""
        correlation_id = uuid4()
        event = AuditEventBuilder.transaction_added(
            transaction=make_transaction(),
            correlation_id=correlation_id,
        )
        assert event.event_type == AuditEventType.TRANSACTION_ADDED
        assert event.entity_id == "1"
        assert event.correlation_id == correlation_id
        assert event.is_user_action is True
        assert event.details["transaction_type"] == "Income"

    def test_audit_event_builder_storage_failed(self):
        """Test AuditEventBuilder.storage_failed picks the event type."""
        error = OSError("disk full")
        load_event = AuditEventBuilder.storage_failed("load", "ledger.json", error)
        save_event = AuditEventBuilder.storage_failed("save", "ledger.json", error)
        assert load_event.event_type == AuditEventType.LOAD_FAILED
        assert save_event.event_type == AuditEventType.SAVE_FAILED
        assert save_event.severity == AuditSeverity.ERROR
        assert save_event.error_type == "OSError"
        assert save_event.error_message == "disk full"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
