"""Audit logging package."""

from budget_ledger.audit.logger import AuditLogger, create_audit_logger

__all__ = ["AuditLogger", "create_audit_logger"]
