"""
In-Memory Ledger

DESIGN DECISION: The ledger is the single owner of the transaction
sequence. It is append-only:
- ids are assigned as current count + 1
- nothing is updated or removed, so ids are never reused
- insertion order is the display order and the persisted order

Aggregates are computed on demand from the sequence. There are no
cached totals that could drift from the recorded transactions.
"""

from typing import Iterable, Iterator

from finance_tracker.models.transaction import (
    Transaction,
    TransactionListing,
    TransactionType,
    TransactionView,
    utc_now,
)


class Ledger:
    """
    Ordered, append-only collection of transactions.

    GUARANTEES:
    - A new transaction never shares its id with an existing one
    - Prior transactions are never touched by an add
    - Balance is always income minus expense over everything recorded
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: list[Transaction] = list(transactions)

    @classmethod
    def from_transactions(cls, transactions: Iterable[Transaction]) -> "Ledger":
        """Build a ledger from previously persisted transactions."""
        return cls(transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only view of all transactions in insertion order."""
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def add_transaction(
        self,
        amount: float,
        category: str,
        kind: TransactionType,
        description: str = "",
    ) -> Transaction:
        """
        Record a new transaction at the end of the ledger.

        No validation beyond what the model enforces: zero and
        negative amounts are accepted as given.

        Returns:
            The newly created transaction
        """
        transaction = Transaction(
            id=len(self._transactions) + 1,
            amount=amount,
            category=category,
            kind=kind,
            timestamp=utc_now(),
            description=description,
        )
        self._transactions.append(transaction)
        return transaction

    def total_income(self) -> float:
        """Sum of all income amounts."""
        return self._sum_of(TransactionType.INCOME)

    def total_expense(self) -> float:
        """Sum of all expense amounts."""
        return self._sum_of(TransactionType.EXPENSE)

    def total_balance(self) -> float:
        """
        Income minus expense across the whole ledger.

        Returns 0 for an empty ledger.
        """
        income = 0.0
        expense = 0.0
        for transaction in self._transactions:
            match transaction.kind:
                case TransactionType.INCOME:
                    income += transaction.amount
                case TransactionType.EXPENSE:
                    expense += transaction.amount
                case _:
                    raise ValueError(
                        f"Unknown transaction type: {transaction.kind!r}"
                    )
        return income - expense

    def list_transactions(self) -> TransactionListing:
        """
        All transactions shaped for display.

        An empty ledger yields a listing with data_found=False
        instead of an empty list of entries.
        """
        if not self._transactions:
            return TransactionListing.empty()

        return TransactionListing(
            data_found=True,
            entries=[
                TransactionView.from_transaction(transaction)
                for transaction in self._transactions
            ],
        )

    def transactions_by_category(self, category: str) -> list[Transaction]:
        """Transactions whose category matches exactly, in insertion order."""
        return [t for t in self._transactions if t.category == category]

    def _sum_of(self, kind: TransactionType) -> float:
        return sum(
            (t.amount for t in self._transactions if t.kind == kind),
            0.0,
        )
