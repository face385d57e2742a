"""
Audit Models for Budget Ledger

Every significant ledger action is logged:
1. Loading the backing file (and every line that had to be skipped)
2. Each transaction added, or the save that failed
3. Reports and category listings requested from the menu

DESIGN DECISION: Audit events are append-only log records. They are never
written to the backing file; the ledger file holds transactions only.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


DESCRIPTION_MAX_LENGTH = 500


def _clip(text: str, limit: int = 60) -> str:
    """Shorten user text for a one-line description."""
    return text if len(text) <= limit else text[: limit - 3] + "..."


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Startup
    LEDGER_LOADED = "ledger_loaded"
    LEDGER_LOAD_FAILED = "ledger_load_failed"
    RECORD_SKIPPED = "record_skipped"

    # Persistence
    TRANSACTION_ADDED = "transaction_added"
    SAVE_FAILED = "save_failed"

    # Queries
    CATEGORY_LISTED = "category_listed"
    REPORT_GENERATED = "report_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    The core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which ledger file this is about
    source: Optional[str] = Field(
        default=None,
        description="Backing file path the event relates to"
    )

    description: str = Field(
        ...,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "source": self.source,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.ledger_loaded("transactions.txt", 12, 0)
        event = AuditEventBuilder.save_failed("transactions.txt", "Permission denied")
    """

    @staticmethod
    def ledger_loaded(
        source: str,
        transaction_count: int,
        skipped_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            source=source,
            description=f"Ledger loaded with {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
                "skipped_count": skipped_count,
            },
        )

    @staticmethod
    def ledger_load_failed(
        source: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOAD_FAILED,
            severity=AuditSeverity.WARNING,
            source=source,
            description="Backing file unreadable, starting with an empty ledger",
            error_message=error_message,
        )

    @staticmethod
    def record_skipped(
        source: str,
        line_number: int,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_SKIPPED,
            severity=AuditSeverity.WARNING,
            source=source,
            description=f"Skipped malformed record on line {line_number}",
            details={
                "line_number": line_number,
            },
            error_message=reason,
        )

    @staticmethod
    def transaction_added(
        source: str,
        kind: str,
        amount: str,
        category: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            source=source,
            description=f"{kind} of {_clip(amount)} recorded",
            details={
                "kind": kind,
                "amount": amount,
                "category": category,
            },
        )

    @staticmethod
    def save_failed(
        source: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            source=source,
            description="Transaction could not be written to the backing file",
            error_message=error_message,
        )

    @staticmethod
    def category_listed(
        category: str,
        result_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_LISTED,
            severity=AuditSeverity.DEBUG,
            description=f"Category '{_clip(category)}' listed with {result_count} results",
            details={
                "category": category,
                "result_count": result_count,
            },
        )

    @staticmethod
    def report_generated(
        total_income: str,
        total_expense: str,
        net_balance: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_GENERATED,
            severity=AuditSeverity.DEBUG,
            description="Financial report generated",
            details={
                "total_income": total_income,
                "total_expense": total_expense,
                "net_balance": net_balance,
            },
        )
