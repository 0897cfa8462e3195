"""
CSV persistence for the two ledger tables.

    from partsledger.storage import InventoryStore, TransactionLog
"""

from partsledger.storage.inventory import InventoryStore
from partsledger.storage.transactions import TransactionLog

__all__ = [
    'InventoryStore',
    'TransactionLog',
]
