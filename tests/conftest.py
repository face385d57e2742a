"""
Shared fixtures.

Tests never read the real ./transactions.txt or .env: every ledger file lives
in pytest's tmp_path and dates come from a fixed clock.
"""

import logging
from datetime import date

import pytest

from budget_ledger.audit import AuditLogger
from budget_ledger.config import get_settings


FIXED_DATE = date(2024, 7, 1)


def fixed_clock() -> date:
    return FIXED_DATE


class RecordingAuditLogger(AuditLogger):
    """Audit logger that keeps events in a list instead of logging them."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)
        return True

    def types(self) -> list[str]:
        return [e.event_type.value for e in self.events]


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def audit_logger():
    return RecordingAuditLogger()


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "transactions.txt"


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path, monkeypatch):
    """Run from a scratch directory with a fresh settings cache."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by the app's logging setup."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
