"""
Inventory store — current quantity per (model, part).

The snapshot is a derived cache of the transaction log: it is loaded in
full, mutated in memory, and rewritten in full on every change.
"""

import csv
import logging
import os
import re
import tempfile
from collections.abc import Mapping
from pathlib import Path

from partsledger.exceptions import MalformedFileError
from partsledger.models.entry import StockKey

logger = logging.getLogger('partsledger')

HEADER = ['model', 'part', 'qty']

INTEGER = re.compile(r'-?[0-9]+')


class InventoryStore:
    """
    CSV-backed snapshot ``model,part,qty``.

    Invariants:
    - At most one row per (model, part)
    - Rows are written sorted by model, then part
    """

    def __init__(self, path: str | Path, encoding: str = 'utf-8'):
        self.path = Path(path)
        self.encoding = encoding

    def ensure(self) -> bool:
        """Create an empty store (header only) if absent. Returns True if created."""
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open('w', encoding=self.encoding, newline='') as fh:
            csv.writer(fh).writerow(HEADER)
        logger.info("inventory.store.created", extra={"path": str(self.path)})
        return True

    def load(self) -> dict[StockKey, int]:
        """
        Read the whole snapshot.

        A missing file is created empty and yields an empty mapping.

        Raises:
            MalformedFileError: If the file exists but cannot be parsed
            OSError: If the file cannot be read
        """
        self.ensure()

        quantities: dict[StockKey, int] = {}
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
                    key, qty = self._parse_row(row, reader.line_num)
                    if key in quantities:
                        raise MalformedFileError(
                            self.path, f"duplicate entry for {key}", line=reader.line_num
                        )
                    quantities[key] = qty
        except UnicodeDecodeError as e:
            raise MalformedFileError(self.path, f"not valid {self.encoding}: {e}") from e
        except csv.Error as e:
            raise MalformedFileError(self.path, str(e)) from e

        return quantities

    def save(self, quantities: Mapping[StockKey, int]) -> None:
        """
        Overwrite the snapshot with ``quantities``, sorted by (model, part).

        The rows go to a temporary file in the same directory which then
        replaces the store, so a failed write leaves the previous snapshot.

        Raises:
            MalformedFileError: If a key cannot be encoded (previous snapshot kept)
            OSError: If the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp'
        )
        try:
            try:
                with os.fdopen(fd, 'w', encoding=self.encoding, newline='') as fh:
                    writer = csv.writer(fh)
                    writer.writerow(HEADER)
                    for key in sorted(quantities):
                        writer.writerow([key.model, key.part, str(quantities[key])])
            except UnicodeEncodeError as e:
                raise MalformedFileError(self.path, f"cannot encode as {self.encoding}: {e}") from e
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _parse_row(self, row: list[str], line: int) -> tuple[StockKey, int]:
        if len(row) != len(HEADER):
            raise MalformedFileError(
                self.path, f"expected {len(HEADER)} columns, got {len(row)}", line=line
            )
        model, part, raw_qty = row
        if not model.strip() or not part.strip():
            raise MalformedFileError(self.path, "empty model or part", line=line)
        if not INTEGER.fullmatch(raw_qty):
            raise MalformedFileError(
                self.path, f"quantity is not an integer: {raw_qty!r}", line=line
            )
        return StockKey(model, part), int(raw_qty)
