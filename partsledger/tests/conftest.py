"""
Pytest fixtures for PartsLedger tests.
"""

import csv

import pytest

from partsledger.conf import PartsLedgerSettings
from partsledger.service import Inventory


@pytest.fixture
def data_dir(tmp_path):
    """Empty data directory for one test."""
    path = tmp_path / 'data'
    path.mkdir()
    return path


@pytest.fixture
def config(data_dir):
    """Settings pointing at the test data directory."""
    return PartsLedgerSettings(DATA_DIR=data_dir)


@pytest.fixture
def inventory(config):
    """Inventory service over the test data directory."""
    return Inventory(config)


@pytest.fixture
def ledger_settings(settings, data_dir):
    """Point Django's PARTSLEDGER setting at the test data directory."""
    settings.PARTSLEDGER = {'DATA_DIR': str(data_dir)}
    return settings


@pytest.fixture
def stocked(inventory):
    """Inventory with X1/P1 = 7 after inbound 10, outbound 3."""
    inventory.inbound('X1', 'P1', 10, note='Entrada')
    inventory.outbound('X1', 'P1', 3, note='Saída')
    return inventory


@pytest.fixture
def read_rows():
    """Read a CSV file as a list of rows (header included)."""
    def _read(path):
        with open(path, newline='', encoding='utf-8') as fh:
            return list(csv.reader(fh))
    return _read


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a CSV file under tmp_path and return its path."""
    def _write(name, rows):
        path = tmp_path / name
        with open(path, 'w', newline='', encoding='utf-8') as fh:
            csv.writer(fh).writerows(rows)
        return path
    return _write
