"""Django app configuration for PartsLedger."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PartsLedgerConfig(AppConfig):
    """Configuration for PartsLedger app."""

    name = "partsledger"
    verbose_name = _("Parts Inventory")
