"""
Abstract Storage Interface

DESIGN DECISION: The ledger talks to its backing store through this interface.
This allows us to:
1. Keep the ledger logic independent of the file format
2. Use in-memory storage for testing
3. Swap the flat file for something else later

The interface is intentionally small: the ledger is append-only,
so loading everything and appending one record is all it needs.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from budget_ledger.models.transaction import Transaction


class SkippedRecord(BaseModel):
    """A stored line that could not be decoded."""

    line_number: int = Field(
        ...,
        ge=1,
        description="1-based line number in the backing file"
    )
    reason: str = Field(
        ...,
        description="Why the line was rejected"
    )


class LoadResult(BaseModel):
    """
    Everything recovered from storage at startup.

    Malformed records do not abort the load; they are reported here.
    """

    transactions: list[Transaction] = Field(default_factory=list)
    skipped: list[SkippedRecord] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class TransactionStorageInterface(ABC):
    """
    Abstract interface for transaction storage.

    Storage is append-only - records are never rewritten or deleted.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where records live."""
        pass

    @abstractmethod
    def load(self) -> LoadResult:
        """
        Read every stored transaction in insertion order.

        A store that does not exist yet loads as empty.

        Returns:
            The decoded transactions plus any skipped records

        Raises:
            StorageReadError: If the store exists but cannot be read
        """
        pass

    @abstractmethod
    def append(self, transaction: Transaction) -> None:
        """
        Persist one transaction after all previously stored ones.

        The record is durable (written and closed) when this returns.

        Raises:
            StorageWriteError: If the record could not be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """The store exists but could not be read."""
    pass


class StorageWriteError(StorageError):
    """A record could not be written to the store."""
    pass


class MalformedRecordError(ValueError):
    """A stored line could not be decoded into a transaction."""
    pass
