"""
Interactive Menu for Finance Tracker

A numbered menu read from standard input:

    1. Add Income
    2. Add Expense
    3. View Transactions
    4. View Total Balance
    5. Exit

The menu operates on an explicit LedgerSession. main() is the only
place that turns a storage failure into a non-zero exit status.
"""

import math
import sys

from finance_tracker.audit import configure_logging
from finance_tracker.config import get_settings
from finance_tracker.models.transaction import TransactionType
from finance_tracker.orchestrator import LedgerSession, create_session
from finance_tracker.services.storage import StorageError


BANNER = "##### Personal Finance Tracker #####"

MENU_OPTIONS = [
    "1. Add Income",
    "2. Add Expense",
    "3. View Transactions",
    "4. View Total Balance",
    "5. Exit",
]

CHOICE_KINDS = {
    "1": TransactionType.INCOME,
    "2": TransactionType.EXPENSE,
}


class InvalidAmountError(ValueError):
    """The amount typed at the prompt is not a finite number."""
    pass


def parse_amount(raw: str) -> float:
    """Parse a user-typed amount, refusing anything that is not a finite number."""
    text = raw.strip()
    try:
        amount = float(text)
    except ValueError:
        raise InvalidAmountError(f"Not a number: {text!r}")
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Not a finite number: {text!r}")
    return amount


def prompt_transaction_details() -> tuple[float, str, str]:
    """
    Ask for amount, category and description, one line each.

    Raises:
        InvalidAmountError: If the amount cannot be parsed
    """
    amount = parse_amount(input("Enter amount: "))
    category = input("Enter category: ").strip()
    description = input("Enter description: ").strip()
    return amount, category, description


def print_menu() -> None:
    print(BANNER)
    for option in MENU_OPTIONS:
        print(option)


def add_transaction(session: LedgerSession, kind: TransactionType) -> None:
    """Prompt for details and record one transaction."""
    try:
        amount, category, description = prompt_transaction_details()
    except InvalidAmountError as e:
        session.audit_logger.log_invalid_input("amount", str(e))
        print("Please enter a valid number")
        return

    session.record(amount, category, kind, description)
    print(f"{kind.value} added successfully.")


def show_transactions(session: LedgerSession) -> None:
    for line in session.list_transactions().lines():
        print(line)


def show_balance(session: LedgerSession) -> None:
    print(f"Your total balance is : {session.total_balance():.2f}")


def handle_choice(session: LedgerSession, choice: str) -> bool:
    """
    Run one menu command.

    Returns:
        False when the user chose to exit, True otherwise
    """
    choice = choice.strip()

    if choice in CHOICE_KINDS:
        add_transaction(session, CHOICE_KINDS[choice])
    elif choice == "3":
        show_transactions(session)
    elif choice == "4":
        show_balance(session)
    elif choice == "5":
        return False
    else:
        print("Invalid choice, please try again.")

    return True


def run_menu(session: LedgerSession) -> None:
    """
    Read commands until the user exits or input ends.

    Raises:
        StorageWriteError: If saving after a change fails
    """
    print_menu()

    while True:
        try:
            keep_going = handle_choice(session, input("Enter your choice: "))
        except EOFError:
            keep_going = False

        if not keep_going:
            print("Exiting...")
            return


def main() -> int:
    """Console entry point."""
    settings = get_settings()
    configure_logging(settings.log_level_number, settings.json_logs)

    try:
        session = create_session(settings)
        run_menu(session)
    except StorageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
