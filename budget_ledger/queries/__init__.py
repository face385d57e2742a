"""Ledger query package."""

from budget_ledger.queries.report import (
    distinct_categories,
    filter_by_category,
    summarize,
)

__all__ = ["distinct_categories", "filter_by_category", "summarize"]
