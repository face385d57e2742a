"""
Budget Ledger - Source Package

A personal finance ledger for recording income and expenses
in a flat, append-only text file.

DESIGN PRINCIPLES:
1. Records never change once written
2. Memory and disk never silently diverge
3. No silent data loss on reload
4. Every write is auditable
5. Storage layer is swappable
"""

from budget_ledger.ledger import LedgerStore
from budget_ledger.models import LedgerReport, Transaction, TransactionKind

__version__ = "1.0.0"

__all__ = [
    "LedgerReport",
    "LedgerStore",
    "Transaction",
    "TransactionKind",
]
