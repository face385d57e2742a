"""
Terminal Frontend for Budget Ledger

A numbered menu loop over the ledger operations:
add income, add expense, list all, list by category, report, exit.

DESIGN PRINCIPLES:
1. Every menu option maps to exactly one ledger operation
2. Bad input is reported and the menu is shown again
3. A failed save is reported, never hidden
4. Ending input (Ctrl-D) exits like choosing "Exit"
"""

import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from pydantic import ValidationError

from budget_ledger import LedgerStore, TransactionKind
from budget_ledger.config import LedgerSettings, get_settings
from budget_ledger.services.storage import StorageWriteError


Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = (
    "\n--- Personal Budgeting App ---\n"
    "1. Add Income\n"
    "2. Add Expense\n"
    "3. View All Transactions\n"
    "4. View Transactions by Category\n"
    "5. Generate Financial Report\n"
    "6. Exit"
)

EXIT_CHOICE = "6"


class InvalidAmountError(ValueError):
    """User typed something that is not a usable amount."""
    pass


def configure_logging(settings: LedgerSettings) -> None:
    """Route stdlib logging (and structlog through it) per settings."""
    handler: logging.Handler
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.effective_log_level)


def parse_amount(text: str, currency_symbol: str = "$") -> Decimal:
    """
    Parse a user-typed amount such as "120.50" or "$120.50".

    Raises:
        InvalidAmountError: If it is not a finite, non-negative number
    """
    cleaned = text.strip()
    if currency_symbol and cleaned.startswith(currency_symbol):
        cleaned = cleaned[len(currency_symbol):].strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmountError(f"'{text.strip()}' is not a valid amount.")

    if not amount.is_finite():
        raise InvalidAmountError(f"'{text.strip()}' is not a valid amount.")
    if amount < 0:
        raise InvalidAmountError("Amount cannot be negative.")
    return amount


def render_add_transaction(
    ledger: LedgerStore,
    kind: TransactionKind,
    read: Reader,
    write: Writer,
) -> None:
    """Prompt for one transaction and record it."""
    label = "income" if kind == TransactionKind.INCOME else "expense"
    symbol = ledger.currency_symbol

    raw_amount = read(f"Enter {label} amount: {symbol}")
    try:
        amount = parse_amount(raw_amount, symbol)
    except InvalidAmountError as e:
        write(f"Invalid amount: {e}")
        return

    category = read("Enter category: ")
    description = read("Enter description: ")

    try:
        ledger.add_transaction(kind, amount, category, description)
    except ValidationError as e:
        write(f"Transaction rejected: {e.errors()[0]['msg']}")
        return
    except StorageWriteError as e:
        write(f"Could not save transaction: {e}")
        return

    write(f"{kind.value} recorded.")


def render_all_transactions(ledger: LedgerStore, write: Writer) -> None:
    write("\n--- All Transactions ---")
    lines = ledger.list_all()
    if not lines:
        write("No transactions recorded yet.")
    for line in lines:
        write(line)


def render_category(ledger: LedgerStore, read: Reader, write: Writer) -> None:
    known = ledger.categories()
    if known:
        write(f"Known categories: {', '.join(known)}")

    category = read("Enter category to filter: ")
    write(f"\n--- Transactions for Category: {category} ---")

    matches = ledger.list_by_category(category)
    if not matches:
        write("No transactions in this category.")
    for t in matches:
        write(t.format(ledger.currency_symbol))


def render_report(ledger: LedgerStore, write: Writer) -> None:
    report = ledger.generate_report()
    write("\n--- Financial Report ---")
    for line in report.format_lines(ledger.currency_symbol):
        write(line)


def run_menu(
    ledger: LedgerStore,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> int:
    """
    Run the menu until the user exits.

    Reads with input() and writes with print() unless told otherwise.
    Returns the process exit code (always 0).
    """
    read = read or input
    write = write or print

    while True:
        write(MENU)
        try:
            choice = read("Enter your choice: ").strip()

            if choice == "1":
                render_add_transaction(ledger, TransactionKind.INCOME, read, write)
            elif choice == "2":
                render_add_transaction(ledger, TransactionKind.EXPENSE, read, write)
            elif choice == "3":
                render_all_transactions(ledger, write)
            elif choice == "4":
                render_category(ledger, read, write)
            elif choice == "5":
                render_report(ledger, write)
            elif choice == EXIT_CHOICE:
                break
            else:
                write("Invalid choice. Please try again.")
        except EOFError:
            break

    write("Exiting the application. Goodbye!")
    return 0


def main(settings: Optional[LedgerSettings] = None) -> int:
    """Application entry point."""
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(settings)
    except OSError as e:
        print(f"Could not open log file: {e}", file=sys.stderr)
        return 1

    ledger = LedgerStore.from_settings(settings)
    return run_menu(ledger)


if __name__ == "__main__":
    sys.exit(main())
