"""
Audit Logger

DESIGN DECISION: Every significant ledger action is logged.
This provides:
1. Traceability of what was added and when
2. Visibility into lines skipped while loading the backing file
3. A record of failed saves

The audit logger:
- Is synchronous, like the rest of the ledger
- Never raises into the caller (a logging failure must not lose a transaction)
"""

from typing import Callable, Optional

import structlog

from budget_ledger.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Events go to the structured local log only.
    """

    def __init__(self, logger_name: str = "budget_ledger.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was handed to the logger.
        """
        try:
            log_dict = event.to_log_dict()
            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception:
            # A broken log handler must not break the ledger
            return False

        return True

    def _record(self, build: Callable[..., AuditEvent], **kwargs) -> bool:
        """
        Build an event and log it.

        Building is guarded too: events carry user text, and a value the
        event model rejects must not fail the operation being audited.
        """
        try:
            event = build(**kwargs)
        except Exception:
            # Same rule as log(): auditing never fails the caller
            return False
        return self.log(event)

    def log_ledger_loaded(
        self,
        source: str,
        transaction_count: int,
        skipped_count: int,
    ) -> None:
        """Log a completed startup load."""
        self._record(
            AuditEventBuilder.ledger_loaded,
            source=source,
            transaction_count=transaction_count,
            skipped_count=skipped_count,
        )

    def log_ledger_load_failed(self, source: str, error_message: str) -> None:
        """Log an unreadable backing file."""
        self._record(
            AuditEventBuilder.ledger_load_failed,
            source=source,
            error_message=error_message,
        )

    def log_record_skipped(
        self,
        source: str,
        line_number: int,
        reason: str,
    ) -> None:
        """Log a malformed line dropped during load."""
        self._record(
            AuditEventBuilder.record_skipped,
            source=source,
            line_number=line_number,
            reason=reason,
        )

    def log_transaction_added(
        self,
        source: str,
        kind: str,
        amount: str,
        category: str,
    ) -> None:
        self._record(
            AuditEventBuilder.transaction_added,
            source=source,
            kind=kind,
            amount=amount,
            category=category,
        )

    def log_save_failed(self, source: str, error_message: str) -> None:
        self._record(
            AuditEventBuilder.save_failed,
            source=source,
            error_message=error_message,
        )

    def log_category_listed(self, category: str, result_count: int) -> None:
        self._record(
            AuditEventBuilder.category_listed,
            category=category,
            result_count=result_count,
        )

    def log_report_generated(
        self,
        total_income: str,
        total_expense: str,
        net_balance: str,
    ) -> None:
        self._record(
            AuditEventBuilder.report_generated,
            total_income=total_income,
            total_expense=total_expense,
            net_balance=net_balance,
        )


def create_audit_logger(name: Optional[str] = None) -> AuditLogger:
    """Create an audit logger bound to the package logger namespace."""
    return AuditLogger(name or "budget_ledger.audit")
