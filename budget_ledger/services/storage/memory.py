"""
In-Memory Storage Implementation

Keeps records in a list. Used by tests and for throwaway sessions.
"""

from typing import Iterable, Optional

from budget_ledger.models.transaction import Transaction
from budget_ledger.services.storage.interface import (
    LoadResult,
    StorageWriteError,
    TransactionStorageInterface,
)


class InMemoryTransactionStorage(TransactionStorageInterface):
    """
    List-backed storage.

    Set fail_writes to make every append raise StorageWriteError.
    """

    def __init__(
        self,
        initial: Optional[Iterable[Transaction]] = None,
        fail_writes: bool = False,
    ):
        self.records: list[Transaction] = list(initial or [])
        self.fail_writes = fail_writes

    @property
    def location(self) -> str:
        return "<memory>"

    def load(self) -> LoadResult:
        return LoadResult(transactions=list(self.records))

    def append(self, transaction: Transaction) -> None:
        if self.fail_writes:
            raise StorageWriteError("In-memory storage is set to fail writes")
        self.records.append(transaction)
