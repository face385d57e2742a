"""
Ledger Queries

DESIGN DECISION: Queries are pure functions over a sequence of transactions.
They never touch storage, so the same inputs always give the same answer.
"""

from decimal import Decimal
from typing import Iterable

from budget_ledger.models.transaction import (
    LedgerReport,
    Transaction,
    TransactionKind,
)


def filter_by_category(
    transactions: Iterable[Transaction],
    category: str,
) -> list[Transaction]:
    """
    Transactions whose category equals `category` exactly.

    Case-sensitive, no partial matching, original order kept.
    """
    return [t for t in transactions if t.category == category]


def distinct_categories(transactions: Iterable[Transaction]) -> list[str]:
    """Categories in the order they first appear."""
    seen: dict[str, None] = {}
    for t in transactions:
        seen.setdefault(t.category, None)
    return list(seen)


def summarize(transactions: Iterable[Transaction]) -> LedgerReport:
    """
    Total income, total expense and their difference.

    Exact Decimal sums; an empty input gives all zeros.
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    count = 0

    for t in transactions:
        if t.kind == TransactionKind.INCOME:
            total_income += t.amount
        else:
            total_expense += t.amount
        count += 1

    return LedgerReport(
        total_income=total_income,
        total_expense=total_expense,
        transaction_count=count,
    )
