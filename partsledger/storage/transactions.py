"""
Transaction log — append-only CSV audit trail.
"""

import csv
import io
import logging
from collections.abc import Iterator
from pathlib import Path

from partsledger.exceptions import MalformedFileError
from partsledger.models.enums import TransactionKind
from partsledger.models.transaction import Transaction, parse_timestamp

logger = logging.getLogger('partsledger')

HEADER = ['timestamp', 'type', 'model', 'part', 'qty', 'note']


class TransactionLog:
    """
    CSV-backed log ``timestamp,type,model,part,qty,note``.

    Lines are only ever appended. Nothing in PartsLedger rewrites,
    reorders or deletes an existing line.
    """

    def __init__(self, path: str | Path, encoding: str = 'utf-8'):
        self.path = Path(path)
        self.encoding = encoding

    def ensure(self) -> bool:
        """Create an empty log (header only) if absent. Returns True if created."""
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open('w', encoding=self.encoding, newline='') as fh:
            csv.writer(fh).writerow(HEADER)
        logger.info("inventory.log.created", extra={"path": str(self.path)})
        return True

    def append(self, record: Transaction) -> None:
        """
        Append exactly one line for ``record``.

        Raises:
            MalformedFileError: If the record cannot be encoded (nothing written)
            OSError: If the file cannot be written
        """
        row = record.as_row()
        try:
            line = self._encode_line(row)
        except UnicodeEncodeError as e:
            raise MalformedFileError(self.path, f"cannot encode as {self.encoding}: {e}") from e

        self.ensure()
        with self.path.open('ab') as fh:
            fh.write(line)

    def _encode_line(self, row: list[str]) -> bytes:
        buffer = io.StringIO(newline='')
        csv.writer(buffer).writerow(row)
        return buffer.getvalue().encode(self.encoding)

    def read(self) -> Iterator[Transaction]:
        """
        Yield records in file order. A missing log yields nothing.

        Raises:
            MalformedFileError: If a line cannot be parsed
        """
        if not self.path.exists():
            return

        try:
            with self.path.open('r', encoding=self.encoding, newline='') as fh:
                reader = csv.reader(fh)
                header = next(reader, None)
                if header != HEADER:
                    raise MalformedFileError(
                        self.path, f"expected header {','.join(HEADER)}", line=1
                    )
                for row in reader:
                    if not row:
                        continue
                    yield self._parse_row(row, reader.line_num)
        except UnicodeDecodeError as e:
            raise MalformedFileError(self.path, f"not valid {self.encoding}: {e}") from e
        except csv.Error as e:
            raise MalformedFileError(self.path, str(e)) from e

    def _parse_row(self, row: list[str], line: int) -> Transaction:
        if len(row) != len(HEADER):
            raise MalformedFileError(
                self.path, f"expected {len(HEADER)} columns, got {len(row)}", line=line
            )
        raw_timestamp, raw_kind, model, part, raw_delta, note = row
        try:
            timestamp = parse_timestamp(raw_timestamp)
            kind = TransactionKind(raw_kind)
            delta = int(raw_delta)
        except ValueError as e:
            raise MalformedFileError(self.path, str(e), line=line) from None
        return Transaction(
            timestamp=timestamp,
            kind=kind,
            model=model,
            part=part,
            delta=delta,
            note=note,
        )
