"""
Transaction model — Immutable ledger of quantity changes.
"""

from dataclasses import dataclass
from datetime import datetime

from django.utils import timezone

from partsledger.models.entry import StockKey
from partsledger.models.enums import TransactionKind


def format_timestamp(value: datetime) -> str:
    """Render as lexically sortable local time: ``2026-10-19 14:03:12+02:00``."""
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return timezone.localtime(value).isoformat(sep=' ', timespec='seconds')


def parse_timestamp(value: str) -> datetime:
    """Inverse of format_timestamp. Raises ValueError on bad input."""
    parsed = datetime.fromisoformat(value)
    if timezone.is_naive(parsed):
        raise ValueError(f"timestamp without UTC offset: {value!r}")
    return parsed


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of a quantity change.

    Rules:
    - Written once, right after the snapshot is saved
    - NEVER rewritten or deleted
    - Corrections are new records (an ADJUST or an inverse movement)

    The sum of all deltas for a key equals that key's current quantity.
    """

    timestamp: datetime
    kind: TransactionKind
    model: str
    part: str
    delta: int
    note: str = ''

    @classmethod
    def record(cls, kind: TransactionKind, key: StockKey, delta: int,
               note: str = '') -> 'Transaction':
        """Create a record stamped with the current time."""
        return cls(
            timestamp=timezone.now(),
            kind=kind,
            model=key.model,
            part=key.part,
            delta=delta,
            note=note or '',
        )

    @property
    def key(self) -> StockKey:
        return StockKey(self.model, self.part)

    def as_row(self) -> list[str]:
        """Column values in transaction file order."""
        return [
            format_timestamp(self.timestamp),
            str(self.kind),
            self.model,
            self.part,
            str(self.delta),
            self.note,
        ]

    def __str__(self) -> str:
        signal = '+' if self.delta > 0 else ''
        return f"{self.kind} {self.key} {signal}{self.delta}"
