"""
Tests for snapshot/log verification and rebuild.
"""

import logging

from partsledger.models import StockKey
from partsledger.services import Discrepancy


class TestInventoryAudit:
    """Tests for inventory.verify() / rebuild()."""

    def test_verify_clean_ledger(self, inventory):
        inventory.inbound('X1', 'P1', 10)
        inventory.outbound('X1', 'P1', 15, allow_negative=True)
        inventory.set_quantity('X2', 'P2', 4)
        inventory.set_quantity('X2', 'P2', 4)

        assert inventory.verify() == []

    def test_verify_empty_ledger(self, inventory):
        assert inventory.verify() == []

    def test_verify_detects_tampered_snapshot(self, stocked):
        stocked.store.save({
            StockKey('X1', 'P1'): 9,
            StockKey('X9', 'P9'): 2,
        })

        assert stocked.verify() == [
            Discrepancy('X1', 'P1', recorded=9, replayed=7),
            Discrepancy('X9', 'P9', recorded=2, replayed=0),
        ]

    def test_rebuild_restores_snapshot(self, stocked, caplog):
        stocked.store.save({StockKey('X1', 'P1'): 100, StockKey('X9', 'P9'): 2})
        log_before = stocked.log.path.read_bytes()

        with caplog.at_level(logging.WARNING, logger='partsledger'):
            fixed = stocked.rebuild()

        assert [(d.model, d.part, d.diff) for d in fixed] == [
            ('X1', 'P1', -93),
            ('X9', 'P9', -2),
        ]
        assert stocked.store.load() == {
            StockKey('X1', 'P1'): 7,
            StockKey('X9', 'P9'): 0,
        }
        assert stocked.verify() == []
        assert stocked.log.path.read_bytes() == log_before
        assert 'X1/P1 rebuilt' in caplog.text

    def test_rebuild_lost_snapshot(self, stocked):
        stocked.store.path.unlink()

        stocked.rebuild()

        assert stocked.store.load() == {StockKey('X1', 'P1'): 7}

    def test_rebuild_noop_when_consistent(self, stocked):
        before = stocked.store.path.read_bytes()

        assert stocked.rebuild() == []
        assert stocked.store.path.read_bytes() == before
