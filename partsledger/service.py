"""
Inventory Service — The single public interface for all inventory operations.

Usage:
    from partsledger import Inventory, NegativeStockError

    inventory = Inventory()                      # PARTSLEDGER settings
    inventory = Inventory(config.with_data_dir('/srv/stock'))

    inventory.inbound('X1', 'P1', 10)
    inventory.outbound('X1', 'P1', 3)
    inventory.status('X1').totals                # {'X1': 7}
"""

from partsledger.conf import PartsLedgerSettings, get_partsledger_settings
from partsledger.services import (
    InventoryAudit,
    InventoryImports,
    InventoryMovements,
    InventoryQueries,
)
from partsledger.storage import InventoryStore, TransactionLog


class Inventory(InventoryQueries, InventoryMovements, InventoryImports, InventoryAudit):
    """
    Single interface for all inventory operations over one data directory.

    Parameter convention: (model, part, quantity, note, ...)

    IMPORTANT: No locking and no caching. Each call reloads the files,
    so one invocation at a time per data directory.
    """

    def __init__(self, config: PartsLedgerSettings | None = None):
        self.config = config or get_partsledger_settings()
        self.store = InventoryStore(self.config.inventory_path, encoding=self.config.ENCODING)
        self.log = TransactionLog(self.config.transactions_path, encoding=self.config.ENCODING)

    def init(self) -> dict[str, bool]:
        """
        Create both files (header only) when absent.

        Returns:
            {'inventory': created?, 'transactions': created?}
        """
        return {
            'inventory': self.store.ensure(),
            'transactions': self.log.ensure(),
        }

    def __repr__(self) -> str:
        return f"<Inventory data_dir={str(self.config.data_dir)!r}>"
