"""
Data Models Package

This package contains all Pydantic models used in Budget Ledger.
"""

from budget_ledger.models.transaction import (
    Clock,
    LedgerReport,
    Transaction,
    TransactionKind,
    system_clock,
)
from budget_ledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "Clock",
    "LedgerReport",
    "Transaction",
    "TransactionKind",
    "system_clock",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
