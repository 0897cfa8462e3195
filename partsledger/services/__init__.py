"""
Inventory services — modular organization of inventory operations.

Each class is a mixin over ``self.store`` / ``self.log``; the Inventory
facade in partsledger.service combines them:
    from partsledger.services import InventoryQueries, InventoryMovements, InventoryImports, InventoryAudit
"""

from partsledger.services.audit import Discrepancy, InventoryAudit
from partsledger.services.imports import InventoryImports
from partsledger.services.movements import InventoryMovements
from partsledger.services.queries import InventoryQueries, StatusReport

__all__ = [
    'InventoryQueries',
    'InventoryMovements',
    'InventoryImports',
    'InventoryAudit',
    'StatusReport',
    'Discrepancy',
]
