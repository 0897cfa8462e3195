"""
Inventory movements — state-changing operations (inbound, outbound, set).

Every method follows the same read-modify-write sequence:
load the whole snapshot, change one entry, save the whole snapshot,
append one transaction. Validation happens before anything is written.
"""

import logging

from partsledger.exceptions import NegativeStockError, ValidationError
from partsledger.models.entry import StockKey
from partsledger.models.enums import TransactionKind
from partsledger.models.transaction import Transaction

logger = logging.getLogger('partsledger')


def validate_key(model, part) -> StockKey:
    """
    Build the composite key, rejecting empty fields.

    Raises:
        ValidationError('MODEL_REQUIRED' | 'PART_REQUIRED')
    """
    if not model or not str(model).strip():
        raise ValidationError('MODEL_REQUIRED')
    if not part or not str(part).strip():
        raise ValidationError('PART_REQUIRED', model=model)
    return StockKey(str(model), str(part))


def validate_encodable(encoding, **fields) -> None:
    """
    Reject text the data files cannot store, before anything is written.

    Raises:
        ValidationError('UNENCODABLE_TEXT')
    """
    for name, value in fields.items():
        try:
            str(value).encode(encoding)
        except UnicodeEncodeError as e:
            raise ValidationError(
                'UNENCODABLE_TEXT', field=name, value=repr(value), encoding=encoding
            ) from e


def validate_quantity(quantity, minimum: int = 1) -> int:
    """
    Raises:
        ValidationError('INVALID_QUANTITY'): If not an integer >= minimum
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError('INVALID_QUANTITY', requested=quantity)
    if quantity < minimum:
        raise ValidationError('INVALID_QUANTITY', requested=quantity, minimum=minimum)
    return quantity


class InventoryMovements:
    """State-changing inventory methods. Needs ``self.store`` and ``self.log``."""

    def inbound(self, model, part, quantity, note='') -> Transaction:
        """
        Stock entry. Always adds to the current quantity, never replaces it.

        Raises:
            ValidationError: If model/part is empty or quantity <= 0
        """
        key = validate_key(model, part)
        quantity = validate_quantity(quantity)
        validate_encodable(self.config.ENCODING, model=key.model, part=key.part, note=note or '')

        quantities = self.store.load()
        current = quantities.get(key, 0)
        quantities[key] = current + quantity
        self.store.save(quantities)

        record = Transaction.record(TransactionKind.INBOUND, key, quantity, note)
        self.log.append(record)
        logger.info(
            "inventory.inbound",
            extra={
                "model": key.model,
                "part": key.part,
                "qty": quantity,
                "balance": quantities[key],
            },
        )
        return record

    def outbound(self, model, part, quantity, note='', allow_negative=False) -> Transaction:
        """
        Stock exit.

        All-or-nothing: when the result would be negative and
        ``allow_negative`` is False, neither file is touched.

        Raises:
            ValidationError: If model/part is empty or quantity <= 0
            NegativeStockError: If current - quantity < 0 without override
        """
        key = validate_key(model, part)
        quantity = validate_quantity(quantity)
        validate_encodable(self.config.ENCODING, model=key.model, part=key.part, note=note or '')

        quantities = self.store.load()
        current = quantities.get(key, 0)
        new_quantity = current - quantity

        if new_quantity < 0 and not allow_negative:
            logger.warning(
                "inventory.outbound.refused",
                extra={
                    "model": key.model,
                    "part": key.part,
                    "qty": quantity,
                    "available": current,
                },
            )
            raise NegativeStockError(
                would_be=new_quantity,
                available=current,
                requested=quantity,
            )

        quantities[key] = new_quantity
        self.store.save(quantities)

        record = Transaction.record(TransactionKind.OUTBOUND, key, -quantity, note)
        self.log.append(record)
        logger.info(
            "inventory.outbound",
            extra={
                "model": key.model,
                "part": key.part,
                "qty": quantity,
                "balance": new_quantity,
            },
        )
        return record

    def set_quantity(self, model, part, quantity, note='') -> Transaction:
        """
        Inventory adjustment (absolute set, e.g. after a physical count).

        Calculates delta automatically: quantity - current. A zero delta is
        still recorded, so repeating the same count leaves a trace.

        Raises:
            ValidationError: If model/part is empty or quantity < 0
        """
        key = validate_key(model, part)
        quantity = validate_quantity(quantity, minimum=0)
        validate_encodable(self.config.ENCODING, model=key.model, part=key.part, note=note or '')

        quantities = self.store.load()
        delta = quantity - quantities.get(key, 0)
        quantities[key] = quantity
        self.store.save(quantities)

        record = Transaction.record(TransactionKind.ADJUST, key, delta, note)
        self.log.append(record)
        logger.info(
            "inventory.adjust",
            extra={
                "model": key.model,
                "part": key.part,
                "delta": delta,
                "balance": quantity,
            },
        )
        return record
