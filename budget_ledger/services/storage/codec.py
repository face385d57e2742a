"""
Record Codec for the backing file

Each transaction is one line. Two layouts are understood:

JSON Lines (written by this package):
    {"kind":"Expense","amount":"120.50","category":"Food","description":"Weekly shop","created_date":"2024-07-01"}

Legacy whitespace layout (read only):
    <KindLabel> <Amount> <Category> <Description>

DESIGN DECISION: New records are always written as JSON.
The legacy layout split free text on whitespace, so multi-word categories
and descriptions were truncated on reload and the date was never stored.
JSON keeps every field exactly. Legacy files are still readable, with the
legacy tokenization: only the first token after the amount is the category,
only the next one is the description, and the rest of the line is dropped.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import ValidationError

from budget_ledger.models.transaction import (
    Clock,
    Transaction,
    TransactionKind,
)
from budget_ledger.services.storage.interface import MalformedRecordError


def encode_transaction(transaction: Transaction) -> str:
    """Serialize a transaction to a single line (no trailing newline)."""
    return transaction.model_dump_json()


def decode_line(line: str, clock: Optional[Clock] = None) -> Transaction:
    """
    Decode one stored line.

    Args:
        line: A non-blank line without its newline
        clock: Date source for legacy lines, which carry no date

    Raises:
        MalformedRecordError: If the line cannot be decoded
    """
    text = line.strip()
    if not text:
        raise MalformedRecordError("empty record")
    if text.startswith("{"):
        return _decode_json(text)
    return _decode_legacy(text, clock)


def _decode_json(text: str) -> Transaction:
    try:
        return Transaction.model_validate_json(text)
    except ValidationError as e:
        raise MalformedRecordError(
            f"invalid JSON record ({e.error_count()} errors)"
        ) from e


def _decode_legacy(text: str, clock: Optional[Clock]) -> Transaction:
    tokens = text.split()
    if len(tokens) < 2:
        raise MalformedRecordError("expected at least a kind label and an amount")

    # Anything other than the exact "Income" label reads back as an expense
    kind = (
        TransactionKind.INCOME
        if tokens[0] == TransactionKind.INCOME.value
        else TransactionKind.EXPENSE
    )

    try:
        amount = Decimal(tokens[1])
    except InvalidOperation as e:
        raise MalformedRecordError(f"amount is not a number: {tokens[1]!r}") from e
    if not amount.is_finite():
        raise MalformedRecordError(f"amount is not finite: {tokens[1]!r}")

    category = tokens[2] if len(tokens) > 2 else ""
    description = tokens[3] if len(tokens) > 3 else ""

    try:
        return Transaction.create(
            kind=kind,
            amount=amount,
            category=category,
            description=description,
            clock=clock,
        )
    except ValidationError as e:
        raise MalformedRecordError(f"invalid legacy record: {tokens[1]!r}") from e
