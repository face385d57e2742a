"""Services package."""

from budget_ledger.services.storage import (
    InMemoryTransactionStorage,
    LoadResult,
    MalformedRecordError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TextFileTransactionStorage,
    TransactionStorageInterface,
)

__all__ = [
    "InMemoryTransactionStorage",
    "LoadResult",
    "MalformedRecordError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "TextFileTransactionStorage",
    "TransactionStorageInterface",
]
