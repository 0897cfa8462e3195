"""
Enums for PartsLedger models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class TransactionKind(models.TextChoices):
    """
    Kind of ledger record, stored in the `type` column.

    INBOUND:  Stock received. Delta is always positive.
    OUTBOUND: Stock issued. Delta is the negated issued quantity.
    ADJUST:   Absolute set. Delta is new - old, any sign including zero.
    """
    INBOUND = 'inbound', _('Inbound')
    OUTBOUND = 'outbound', _('Outbound')
    ADJUST = 'adjust', _('Adjustment')
