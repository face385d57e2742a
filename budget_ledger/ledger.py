"""
Ledger Store for Budget Ledger

Holds the in-memory ledger and keeps it mirrored to the backing store:
1. Startup: load every stored record (skipping malformed ones)
2. Add: build the transaction, write it to storage, then keep it in memory
3. List / filter / report: answered from memory only

DESIGN DECISION: Storage is written BEFORE memory is updated.
If the write fails the error propagates and the in-memory ledger is left
exactly as it was, so memory and disk never disagree about what was recorded.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from budget_ledger.audit import AuditLogger, create_audit_logger
from budget_ledger.config import LedgerSettings, get_settings
from budget_ledger.models.transaction import (
    Clock,
    LedgerReport,
    Transaction,
    TransactionKind,
    system_clock,
)
from budget_ledger.queries import distinct_categories, filter_by_category, summarize
from budget_ledger.services.storage import (
    StorageReadError,
    StorageWriteError,
    TextFileTransactionStorage,
    TransactionStorageInterface,
)


class LedgerStore:
    """
    The ordered, append-only collection of transactions.

    Order is insertion order. There are no identifiers and no
    update or delete operations.
    """

    def __init__(
        self,
        storage: TransactionStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        clock: Optional[Clock] = None,
        currency_symbol: str = "$",
    ):
        self._storage = storage
        self._audit_logger = audit_logger
        self._clock = clock or system_clock
        self._currency_symbol = currency_symbol
        self._transactions: list[Transaction] = []

        self._load()

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        audit_logger: Optional[AuditLogger] = None,
        clock: Optional[Clock] = None,
        currency_symbol: str = "$",
    ) -> "LedgerStore":
        """Ledger backed by a flat text file at `path`."""
        storage = TextFileTransactionStorage(path, clock=clock)
        return cls(
            storage,
            audit_logger=audit_logger,
            clock=clock,
            currency_symbol=currency_symbol,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[LedgerSettings] = None,
        clock: Optional[Clock] = None,
    ) -> "LedgerStore":
        """Ledger configured from application settings, with auditing on."""
        settings = settings or get_settings()
        return cls.open(
            settings.data_file,
            audit_logger=create_audit_logger(),
            clock=clock,
            currency_symbol=settings.currency_symbol,
        )

    def _load(self) -> None:
        """Rebuild the ledger from storage."""
        source = self._storage.location
        try:
            result = self._storage.load()
        except StorageReadError as e:
            # Unreadable counts as "no prior data"
            if self._audit_logger:
                self._audit_logger.log_ledger_load_failed(source, str(e))
            return

        self._transactions.extend(result.transactions)

        if self._audit_logger:
            for skipped in result.skipped:
                self._audit_logger.log_record_skipped(
                    source=source,
                    line_number=skipped.line_number,
                    reason=skipped.reason,
                )
            self._audit_logger.log_ledger_loaded(
                source=source,
                transaction_count=len(result.transactions),
                skipped_count=result.skipped_count,
            )

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only view in insertion order."""
        return tuple(self._transactions)

    @property
    def currency_symbol(self) -> str:
        return self._currency_symbol

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(
        self,
        kind: TransactionKind,
        amount: Decimal,
        category: str,
        description: str,
    ) -> Transaction:
        """
        Record a new transaction, on disk first and then in memory.

        Identical transactions may be added any number of times.

        Raises:
            pydantic.ValidationError: If the amount is negative or not a number
            StorageWriteError: If the record could not be persisted.
                The in-memory ledger is unchanged in that case.
        """
        transaction = Transaction.create(
            kind=kind,
            amount=amount,
            category=category,
            description=description,
            clock=self._clock,
        )

        try:
            self._storage.append(transaction)
        except StorageWriteError as e:
            if self._audit_logger:
                self._audit_logger.log_save_failed(self._storage.location, str(e))
            raise

        self._transactions.append(transaction)

        if self._audit_logger:
            self._audit_logger.log_transaction_added(
                source=self._storage.location,
                kind=transaction.kind.value,
                amount=str(transaction.amount),
                category=transaction.category,
            )

        return transaction

    def list_all(self) -> list[str]:
        """Display line for every transaction, in insertion order."""
        return [t.format(self._currency_symbol) for t in self._transactions]

    def list_by_category(self, category: str) -> list[Transaction]:
        """Transactions whose category matches exactly (case-sensitive)."""
        matches = filter_by_category(self._transactions, category)
        if self._audit_logger:
            self._audit_logger.log_category_listed(category, len(matches))
        return matches

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return distinct_categories(self._transactions)

    def generate_report(self) -> LedgerReport:
        """Total income, total expense and net balance of the whole ledger."""
        report = summarize(self._transactions)
        if self._audit_logger:
            self._audit_logger.log_report_generated(
                total_income=str(report.total_income),
                total_expense=str(report.total_expense),
                net_balance=str(report.net_balance),
            )
        return report
