"""
Bulk inbound — apply a CSV of receipts row by row.

Expected file layout (header required, ``note`` optional):

    model,part,qty,note
    X1,P1,10,Delivery #42
    X1,P2,4,
"""

import codecs
import csv
import logging
from pathlib import Path

from partsledger.exceptions import LedgerError, ValidationError
from partsledger.models.transaction import Transaction

logger = logging.getLogger('partsledger')

REQUIRED_COLUMNS = ('model', 'part', 'qty')


def parse_quantity(raw, row: int) -> int:
    """Integer quantity from a CSV cell."""
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError('INVALID_QUANTITY', requested=raw, row=row) from None


def read_encoding(encoding: str) -> str:
    """UTF-8 files from spreadsheet exports often start with a BOM."""
    if codecs.lookup(encoding).name == 'utf-8':
        return 'utf-8-sig'
    return encoding


class InventoryImports:
    """Bulk operations built on ``self.inbound``."""

    def apply_inbound_file(self, path, encoding=None) -> list[Transaction]:
        """
        Apply every row of ``path`` as an inbound movement, in file order.

        Stops at the first failing row. Rows applied before it stay
        applied; there is no rollback.

        Returns:
            Transactions recorded, one per row

        Raises:
            FileNotFoundError: If path does not exist (nothing applied)
            ValidationError: For a bad header (nothing applied) or a bad row
                (earlier rows applied; ``data['row']`` is the 1-based row).
                A file that cannot be decoded or is not CSV stops the same
                way, with code INVALID_IMPORT_ENCODING or INVALID_IMPORT_FILE
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Inbound file not found: {path}")

        encoding = encoding or self.config.ENCODING
        applied: list[Transaction] = []
        try:
            self._apply_rows(path, read_encoding(encoding), applied)
        except UnicodeDecodeError as e:
            self._halted(path, len(applied) + 1, applied, 'INVALID_IMPORT_ENCODING')
            raise ValidationError(
                'INVALID_IMPORT_ENCODING', path=str(path), encoding=encoding,
                row=len(applied) + 1,
            ) from e
        except csv.Error as e:
            self._halted(path, len(applied) + 1, applied, 'INVALID_IMPORT_FILE')
            raise ValidationError(
                'INVALID_IMPORT_FILE', path=str(path), reason=str(e),
                row=len(applied) + 1,
            ) from e

        logger.info(
            "inventory.import",
            extra={"path": str(path), "rows": len(applied)},
        )
        return applied

    def _apply_rows(self, path: Path, encoding: str, applied: list[Transaction]) -> None:
        with path.open('r', encoding=encoding, newline='') as fh:
            reader = csv.DictReader(fh)
            columns = [c.strip() for c in reader.fieldnames or []]
            missing = [c for c in REQUIRED_COLUMNS if c not in columns]
            if missing:
                raise ValidationError(
                    'INVALID_IMPORT_HEADER', path=str(path), missing=','.join(missing)
                )
            reader.fieldnames = columns

            for number, row in enumerate(reader, start=1):
                try:
                    record = self.inbound(
                        row.get('model') or '',
                        row.get('part') or '',
                        parse_quantity(row.get('qty'), number),
                        note=row.get('note') or '',
                    )
                except LedgerError as e:
                    e.data.setdefault('row', number)
                    self._halted(path, number, applied, e.code)
                    raise
                applied.append(record)

    def _halted(self, path, row, applied, code) -> None:
        logger.warning(
            "inventory.import.halted",
            extra={
                "path": str(path),
                "row": row,
                "applied": len(applied),
                "code": code,
            },
        )
