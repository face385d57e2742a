"""
Core Data Models for Budget Ledger

A Transaction is one recorded financial event. Once created it never changes:
there is no update or delete, the ledger only grows.

DESIGN DECISION: Amounts are Decimal, not float.
Totals in the report must be exact (120.50 + 0.10 is 120.60, not 120.6000000001).

DESIGN DECISION: The creation date comes from an injectable clock.
Production code uses the local system date; tests pass a fixed date.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
)


Clock = Callable[[], date]


def system_clock() -> date:
    """Today's date from the local system clock."""
    return date.today()


# =============================================================================
# ENUMS
# =============================================================================

class TransactionKind(str, Enum):
    """
    Sign convention for aggregation.

    The values double as the labels written to the backing file
    and shown in listings.
    """
    INCOME = "Income"
    EXPENSE = "Expense"


# =============================================================================
# TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    A single income or expense record.

    CRITICAL: Frozen. Assigning to any field after construction raises.

    Category and description are free text and kept verbatim:
    no stripping, no predefined category set.
    """
    model_config = ConfigDict(frozen=True)

    kind: TransactionKind = Field(
        ...,
        description="Income or Expense"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Non-negative magnitude, currency agnostic"
    )
    category: str = Field(
        default="",
        description="Free-text grouping label (e.g. 'Food', 'Rent')"
    )
    description: str = Field(
        default="",
        description="Free-text note"
    )
    created_date: date = Field(
        ...,
        description="Calendar date the record was created"
    )

    @classmethod
    def create(
        cls,
        kind: TransactionKind,
        amount: Decimal,
        category: str,
        description: str,
        clock: Optional[Clock] = None,
    ) -> "Transaction":
        """
        Build a new transaction stamped with today's date.

        Args:
            kind: Income or Expense
            amount: Non-negative amount
            category: Free-text category
            description: Free-text note
            clock: Date source; defaults to the system clock

        Raises:
            pydantic.ValidationError: If the amount is negative or not a number
        """
        clock = clock or system_clock
        return cls(
            kind=kind,
            amount=amount,
            category=category,
            description=description,
            created_date=clock(),
        )

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    def format(self, currency_symbol: str = "$") -> str:
        """Render all five fields as one display line."""
        return (
            f"Date: {self.created_date.isoformat()}, "
            f"Type: {self.kind.value}, "
            f"Amount: {currency_symbol}{self.amount:.2f}, "
            f"Category: {self.category}, "
            f"Description: {self.description}"
        )


# =============================================================================
# REPORT MODEL
# =============================================================================

class LedgerReport(BaseModel):
    """
    Totals across the whole ledger.

    No date-range filtering and no per-category breakdown:
    just income, expense and the difference.
    """
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(
        default=Decimal("0"),
        description="Sum of all income amounts"
    )
    total_expense: Decimal = Field(
        default=Decimal("0"),
        description="Sum of all expense amounts"
    )
    transaction_count: int = Field(
        default=0,
        ge=0,
        description="Number of transactions summarized"
    )

    @computed_field
    @property
    def net_balance(self) -> Decimal:
        """Total income minus total expense."""
        return self.total_income - self.total_expense

    def as_tuple(self) -> tuple[Decimal, Decimal, Decimal]:
        """(total_income, total_expense, net_balance)"""
        return (self.total_income, self.total_expense, self.net_balance)

    def format_lines(self, currency_symbol: str = "$") -> list[str]:
        """Display lines for the financial report."""
        return [
            f"Total Income: {currency_symbol}{self.total_income:.2f}",
            f"Total Expense: {currency_symbol}{self.total_expense:.2f}",
            f"Net Balance: {currency_symbol}{self.net_balance:.2f}",
        ]
