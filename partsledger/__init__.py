"""
Django PartsLedger — stock ledger for (model, part) inventories.

Usage:
    from partsledger import Inventory, LedgerError

    inventory = Inventory()
    inventory.inbound('X1', 'P1', 10, note='Delivery #42')
    inventory.outbound('X1', 'P1', 3)
    inventory.status('X1').totals  # {'X1': 7}
"""


def __getattr__(name):
    """Lazy import to avoid touching Django settings during app loading."""
    if name == 'Inventory':
        from partsledger.service import Inventory
        return Inventory
    elif name == 'LedgerError':
        from partsledger.exceptions import LedgerError
        return LedgerError
    elif name == 'ValidationError':
        from partsledger.exceptions import ValidationError
        return ValidationError
    elif name == 'NegativeStockError':
        from partsledger.exceptions import NegativeStockError
        return NegativeStockError
    elif name == 'MalformedFileError':
        from partsledger.exceptions import MalformedFileError
        return MalformedFileError
    elif name == 'StockKey':
        from partsledger.models.entry import StockKey
        return StockKey
    elif name == 'Transaction':
        from partsledger.models.transaction import Transaction
        return Transaction
    elif name == 'TransactionKind':
        from partsledger.models.enums import TransactionKind
        return TransactionKind
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'Inventory',
    'LedgerError',
    'ValidationError',
    'NegativeStockError',
    'MalformedFileError',
    'StockKey',
    'Transaction',
    'TransactionKind',
]

__version__ = '0.1.0'
