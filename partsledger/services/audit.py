"""
Ledger audit — check the snapshot against the transaction log.

The log is the source of truth: summing every logged delta for a key
(adjust deltas are relative too) gives the quantity the snapshot should
hold. Use for:
- Integrity audit after manual edits of the CSV files
- Rebuilding a lost or damaged snapshot
"""

import logging
from dataclasses import dataclass

from partsledger.models.entry import StockKey

logger = logging.getLogger('partsledger')


@dataclass(frozen=True)
class Discrepancy:
    """Stock line whose snapshot quantity differs from the log replay."""

    model: str
    part: str
    recorded: int
    replayed: int

    @property
    def diff(self) -> int:
        return self.replayed - self.recorded


class InventoryAudit:
    """Snapshot/log consistency checks. Needs ``self.store`` and ``self.log``."""

    def replay(self) -> dict[StockKey, int]:
        """Quantities implied by the transaction log."""
        replayed: dict[StockKey, int] = {}
        for record in self.log.read():
            replayed[record.key] = replayed.get(record.key, 0) + record.delta
        return replayed

    def verify(self) -> list[Discrepancy]:
        """Keys where snapshot and log disagree, sorted by (model, part)."""
        return self._compare(self.store.load(), self.replay())

    def rebuild(self) -> list[Discrepancy]:
        """
        Rewrite the snapshot from the log.

        Does not append to the log: this repairs the cache, it is not a
        stock movement.

        Returns:
            Discrepancies that were corrected
        """
        recorded = self.store.load()
        replayed = self.replay()
        discrepancies = self._compare(recorded, replayed)

        if discrepancies:
            self.store.save({**{key: 0 for key in recorded}, **replayed})
            for d in discrepancies:
                logger.warning(
                    f"Stock line {d.model}/{d.part} rebuilt: {d.recorded} → {d.replayed} "
                    f"(diff: {d.diff})"
                )

        return discrepancies

    def _compare(self, recorded, replayed) -> list[Discrepancy]:
        discrepancies = []
        for key in sorted(set(recorded) | set(replayed)):
            have = recorded.get(key, 0)
            expected = replayed.get(key, 0)
            if have != expected:
                discrepancies.append(Discrepancy(key.model, key.part, have, expected))
        return discrepancies
