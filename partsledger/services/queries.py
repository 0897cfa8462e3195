"""
Inventory queries — read-only operations.
"""

from dataclasses import dataclass, field

from partsledger.models.entry import InventoryEntry, StockKey


@dataclass(frozen=True)
class StatusReport:
    """Filtered stock lines, sorted by (model, part), with totals per model."""

    entries: list[InventoryEntry] = field(default_factory=list)
    totals: dict[str, int] = field(default_factory=dict)
    model: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def grand_total(self) -> int:
        return sum(self.totals.values())


class InventoryQueries:
    """Read-only inventory methods. Needs ``self.store``."""

    def quantity(self, model: str, part: str) -> int:
        """Current quantity of one stock line (0 if it does not exist)."""
        return self.store.load().get(StockKey(model, part), 0)

    def status(self, model: str | None = None) -> StatusReport:
        """
        Current stock, optionally restricted to one model (exact match).

        Args:
            model: Model filter (None or '' = all models)

        Returns:
            StatusReport; ``is_empty`` is True when nothing matched
        """
        quantities = self.store.load()

        entries = [
            InventoryEntry(key.model, key.part, qty)
            for key, qty in sorted(quantities.items())
            if not model or key.model == model
        ]

        totals: dict[str, int] = {}
        for entry in entries:
            totals[entry.model] = totals.get(entry.model, 0) + entry.quantity

        return StatusReport(entries=entries, totals=totals, model=model or None)
