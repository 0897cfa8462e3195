"""
PartsLedger configuration.

Usage in settings.py:
    PARTSLEDGER = {
        "DATA_DIR": BASE_DIR / "inventory-data",
        "INVENTORY_FILE": "inventory.csv",
        "TRANSACTIONS_FILE": "transactions.csv",
    }
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from django.conf import settings


@dataclass(frozen=True)
class PartsLedgerSettings:
    """PartsLedger configuration settings."""

    # Directory holding both CSV files
    DATA_DIR: str | Path = "data"

    # Current-quantity snapshot (model,part,qty)
    INVENTORY_FILE: str = "inventory.csv"

    # Append-only audit trail (timestamp,type,model,part,qty,note)
    TRANSACTIONS_FILE: str = "transactions.csv"

    ENCODING: str = "utf-8"

    @property
    def data_dir(self) -> Path:
        return Path(self.DATA_DIR)

    @property
    def inventory_path(self) -> Path:
        return self.data_dir / self.INVENTORY_FILE

    @property
    def transactions_path(self) -> Path:
        return self.data_dir / self.TRANSACTIONS_FILE

    def with_data_dir(self, data_dir: str | Path) -> "PartsLedgerSettings":
        """Copy of these settings pointing at another data directory."""
        return replace(self, DATA_DIR=data_dir)


def get_partsledger_settings() -> PartsLedgerSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "PARTSLEDGER", {})
    return PartsLedgerSettings(**{
        k: v for k, v in user_settings.items()
        if k in PartsLedgerSettings.__dataclass_fields__
    })

