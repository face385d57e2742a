"""
Flat Text File Storage Implementation

DESIGN DECISION: A plain, line-oriented, append-only text file.
1. One transaction per line, no header, no trailer
2. Each append opens, writes one line and closes the file
3. The file is only ever read in full, once, at startup

TRADEOFFS:
- No locking (single user, single process)
- An interrupted append can leave a partial last line. It is skipped on the
  next load, and the next append starts on a fresh line so only that one
  record is lost.
"""

import os
from pathlib import Path
from typing import Optional, Union

from budget_ledger.models.transaction import Clock, Transaction
from budget_ledger.services.storage.codec import decode_line, encode_transaction
from budget_ledger.services.storage.interface import (
    LoadResult,
    MalformedRecordError,
    SkippedRecord,
    StorageReadError,
    StorageWriteError,
    TransactionStorageInterface,
)


class TextFileTransactionStorage(TransactionStorageInterface):
    """
    Stores transactions in a flat text file, one record per line.

    Reads both JSON Lines and the legacy whitespace layout;
    always writes JSON Lines.
    """

    def __init__(
        self,
        path: Union[str, Path],
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            path: Backing file path. It need not exist yet.
            clock: Date source for legacy records, which store no date
        """
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> LoadResult:
        """
        Read every record in the backing file.

        A missing file is "no prior data", not an error.
        Malformed lines, including lines that are not valid UTF-8,
        are skipped and reported in the result.
        """
        result = LoadResult()

        try:
            with open(self._path, "rb") as f:
                for line_number, raw in enumerate(f, start=1):
                    if not raw.strip():
                        continue
                    try:
                        line = _decode_utf8(raw)
                        result.transactions.append(decode_line(line, self._clock))
                    except MalformedRecordError as e:
                        result.skipped.append(
                            SkippedRecord(line_number=line_number, reason=str(e))
                        )
        except FileNotFoundError:
            return LoadResult()
        except OSError as e:
            raise StorageReadError(f"Could not read {self._path}: {e}") from e

        return result

    def append(self, transaction: Transaction) -> None:
        """
        Append one record and close the file before returning.

        Raises:
            StorageWriteError: If the file cannot be opened or written
        """
        record = encode_transaction(transaction).encode("utf-8") + b"\n"

        try:
            with open(self._path, "ab+") as f:
                if self._needs_leading_newline(f):
                    record = b"\n" + record
                f.write(record)
                f.flush()
        except OSError as e:
            raise StorageWriteError(f"Could not write to {self._path}: {e}") from e

    @staticmethod
    def _needs_leading_newline(f) -> bool:
        """True when the file ends in a partial line."""
        size = f.seek(0, os.SEEK_END)
        if size == 0:
            return False
        f.seek(size - 1)
        return f.read(1) != b"\n"


def _decode_utf8(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(
            f"not valid UTF-8 at byte {e.start}"
        ) from e
