"""
Tests for inventory.apply_inbound_file().
"""

import pytest

from partsledger import ValidationError
from partsledger.models import StockKey, TransactionKind


class TestApplyInboundFile:
    """Bulk inbound from CSV."""

    def test_applies_rows_in_order(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', 'part', 'qty', 'note'],
            ['X1', 'P1', '10', 'Delivery #1'],
            ['X1', 'P2', '4', ''],
            ['X1', 'P1', '2', 'Delivery #2'],
        ])

        records = inventory.apply_inbound_file(path)

        assert [(r.part, r.delta, r.note) for r in records] == [
            ('P1', 10, 'Delivery #1'),
            ('P2', 4, ''),
            ('P1', 2, 'Delivery #2'),
        ]
        assert inventory.store.load() == {
            StockKey('X1', 'P1'): 12,
            StockKey('X1', 'P2'): 4,
        }
        assert all(r.kind == TransactionKind.INBOUND for r in inventory.log.read())

    def test_note_column_is_optional(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', 'part', 'qty'],
            ['X1', 'P1', '3'],
        ])

        records = inventory.apply_inbound_file(path)

        assert records[0].note == ''
        assert inventory.quantity('X1', 'P1') == 3

    def test_missing_file_raises_before_any_row(self, inventory, tmp_path):
        with pytest.raises(FileNotFoundError):
            inventory.apply_inbound_file(tmp_path / 'nope.csv')

        assert not inventory.store.path.exists()
        assert not inventory.log.path.exists()

    def test_halts_on_first_invalid_row(self, inventory, write_csv):
        """[valid, invalid(qty=0), valid]: only the first row is persisted."""
        path = write_csv('receipts.csv', [
            ['model', 'part', 'qty', 'note'],
            ['X1', 'P1', '5', 'ok'],
            ['X1', 'P2', '0', 'bad'],
            ['X1', 'P3', '7', 'never'],
        ])

        with pytest.raises(ValidationError) as exc:
            inventory.apply_inbound_file(path)

        assert exc.value.code == 'INVALID_QUANTITY'
        assert exc.value.data['row'] == 2
        assert inventory.store.load() == {StockKey('X1', 'P1'): 5}
        assert [r.part for r in inventory.log.read()] == ['P1']

    def test_non_integer_quantity(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', 'part', 'qty'],
            ['X1', 'P1', 'ten'],
        ])

        with pytest.raises(ValidationError) as exc:
            inventory.apply_inbound_file(path)

        assert exc.value.code == 'INVALID_QUANTITY'
        assert exc.value.data['row'] == 1

    def test_empty_model_row(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', 'part', 'qty'],
            ['X1', 'P1', '1'],
            ['', 'P2', '1'],
        ])

        with pytest.raises(ValidationError) as exc:
            inventory.apply_inbound_file(path)

        assert exc.value.code == 'MODEL_REQUIRED'
        assert exc.value.data['row'] == 2
        assert inventory.quantity('X1', 'P1') == 1

    def test_missing_required_column(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', 'qty'],
            ['X1', '1'],
        ])

        with pytest.raises(ValidationError) as exc:
            inventory.apply_inbound_file(path)

        assert exc.value.code == 'INVALID_IMPORT_HEADER'
        assert exc.value.data['missing'] == 'part'
        assert not inventory.log.path.exists()

    def test_header_whitespace_is_ignored(self, inventory, write_csv):
        path = write_csv('receipts.csv', [
            ['model', ' part', ' qty '],
            ['X1', 'P1', ' 6'],
        ])

        inventory.apply_inbound_file(path)

        assert inventory.quantity('X1', 'P1') == 6

    def test_utf8_bom_is_ignored(self, inventory, tmp_path):
        """Spreadsheet exports prefix the header with a byte order mark."""
        path = tmp_path / 'receipts.csv'
        path.write_bytes(b'\xef\xbb\xbfmodel,part,qty\r\nX1,P1,2\r\n')

        inventory.apply_inbound_file(path)

        assert inventory.quantity('X1', 'P1') == 2

    def test_file_in_wrong_encoding(self, inventory, tmp_path):
        path = tmp_path / 'receipts.csv'
        path.write_bytes('model,part,qty,note\nX1,P1,3,ok\nX1,P2,4,café\n'.encode('latin-1'))

        with pytest.raises(ValidationError) as exc:
            inventory.apply_inbound_file(path)

        assert exc.value.code == 'INVALID_IMPORT_ENCODING'
        assert exc.value.data['encoding'] == 'utf-8'
        assert 'row' in exc.value.data
        assert not inventory.log.path.exists()

    def test_explicit_encoding(self, inventory, tmp_path):
        path = tmp_path / 'receipts.csv'
        path.write_bytes('model,part,qty,note\nX1,P1,3,café\n'.encode('latin-1'))

        records = inventory.apply_inbound_file(path, encoding='latin-1')

        assert records[0].note == 'café'
        assert inventory.quantity('X1', 'P1') == 3
