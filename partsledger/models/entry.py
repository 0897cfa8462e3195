"""
Inventory entry — one (model, part) stock line.
"""

from typing import NamedTuple


class StockKey(NamedTuple):
    """
    Composite key of a stock line.

    Both fields are case-sensitive. Keys sort by model, then part,
    using plain string ordering.
    """

    model: str
    part: str

    def __str__(self) -> str:
        return f"{self.model}/{self.part}"


class InventoryEntry(NamedTuple):
    """Stock line with its current quantity."""

    model: str
    part: str
    quantity: int

    @property
    def key(self) -> StockKey:
        return StockKey(self.model, self.part)
