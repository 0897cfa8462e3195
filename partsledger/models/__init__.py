"""
PartsLedger Models.

Plain value types persisted in CSV, not database tables:
- StockKey: (model, part) composite key of a stock line
- InventoryEntry: One stock line with its current quantity
- Transaction: Immutable ledger record of a quantity change
"""

from partsledger.models.entry import InventoryEntry, StockKey
from partsledger.models.enums import TransactionKind
from partsledger.models.transaction import Transaction

__all__ = [
    'TransactionKind',
    'StockKey',
    'InventoryEntry',
    'Transaction',
]
