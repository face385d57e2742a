"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The flat text file is the production backend.
"""

from budget_ledger.services.storage.interface import (
    LoadResult,
    MalformedRecordError,
    SkippedRecord,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TransactionStorageInterface,
)
from budget_ledger.services.storage.codec import decode_line, encode_transaction
from budget_ledger.services.storage.memory import InMemoryTransactionStorage
from budget_ledger.services.storage.text_file import TextFileTransactionStorage

__all__ = [
    # Interface
    "LoadResult",
    "SkippedRecord",
    "TransactionStorageInterface",
    # Exceptions
    "MalformedRecordError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Codec
    "decode_line",
    "encode_transaction",
    # Implementations
    "InMemoryTransactionStorage",
    "TextFileTransactionStorage",
]
