"""
Management command for day-to-day inventory work.

Usage:
    python manage.py inventory init
    python manage.py inventory add-inbound X1 P1 10 --note "Delivery #42"
    python manage.py inventory add-outbound X1 P1 3 [--allow-negative]
    python manage.py inventory apply-inbound-file receipts.csv
    python manage.py inventory set-qty X1 P1 5 --note "Physical count"
    python manage.py inventory status [--model X1]
    python manage.py inventory verify [--fix]
    python manage.py inventory --data-dir /srv/stock status
"""

from django.core.management.base import BaseCommand, CommandError

from partsledger.conf import get_partsledger_settings
from partsledger.exceptions import LedgerError, NegativeStockError
from partsledger.service import Inventory


class Command(BaseCommand):
    """Inventory command with one subcommand per operation."""

    help = 'Track per-(model, part) stock quantities'

    def add_arguments(self, parser):
        parser.add_argument(
            '--data-dir',
            help='Directory holding inventory.csv and transactions.csv '
                 '(default: PARTSLEDGER["DATA_DIR"])'
        )
        subparsers = parser.add_subparsers(
            dest='subcommand', metavar='subcommand', required=True
        )

        subparsers.add_parser('init', help='Create both files if absent')

        inbound = subparsers.add_parser('add-inbound', help='Receive stock')
        self._add_movement_arguments(inbound)

        outbound = subparsers.add_parser('add-outbound', help='Issue stock')
        self._add_movement_arguments(outbound)
        outbound.add_argument(
            '--allow-negative',
            action='store_true',
            help='Allow the quantity to go below zero'
        )

        bulk = subparsers.add_parser(
            'apply-inbound-file', help='Receive every row of a model,part,qty,note CSV'
        )
        bulk.add_argument('path')

        set_qty = subparsers.add_parser('set-qty', help='Set an absolute quantity')
        self._add_movement_arguments(set_qty)

        status = subparsers.add_parser('status', help='Show current stock')
        status.add_argument('--model', help='Only this model (exact match)')

        verify = subparsers.add_parser(
            'verify', help='Check the snapshot against the transaction log'
        )
        verify.add_argument(
            '--fix',
            action='store_true',
            help='Rebuild the snapshot from the log when they disagree'
        )

    def _add_movement_arguments(self, parser):
        parser.add_argument('model')
        parser.add_argument('part')
        parser.add_argument('qty', type=int)
        parser.add_argument('--note', default='')

    def handle(self, *args, **options):
        config = get_partsledger_settings()
        if options.get('data_dir'):
            config = config.with_data_dir(options['data_dir'])
        inventory = Inventory(config)

        handler = getattr(self, 'handle_' + options['subcommand'].replace('-', '_'))
        try:
            handler(inventory, options)
        except NegativeStockError as e:
            raise CommandError(
                f"Insufficient stock for {options['model']}/{options['part']}: "
                f"removing {e.requested} from {e.available} would leave {e.would_be}. "
                f"Use --allow-negative to override."
            ) from e
        except LedgerError as e:
            raise CommandError(str(e)) from e
        except FileNotFoundError as e:
            raise CommandError(str(e)) from e
        except OSError as e:
            raise CommandError(f"Cannot access inventory files: {e}") from e

    # ══════════════════════════════════════════════════════════════
    # SUBCOMMANDS
    # ══════════════════════════════════════════════════════════════

    def handle_init(self, inventory, options):
        created = inventory.init()
        for name, path in (('inventory', inventory.store.path),
                           ('transactions', inventory.log.path)):
            state = 'created' if created[name] else 'exists'
            self.stdout.write(f'{path} ({state})')
        self.stdout.write(self.style.SUCCESS('Inventory ready'))

    def handle_add_inbound(self, inventory, options):
        record = inventory.inbound(
            options['model'], options['part'], options['qty'], note=options['note']
        )
        self._confirm(inventory, record)

    def handle_add_outbound(self, inventory, options):
        record = inventory.outbound(
            options['model'], options['part'], options['qty'],
            note=options['note'], allow_negative=options['allow_negative'],
        )
        self._confirm(inventory, record)

    def handle_apply_inbound_file(self, inventory, options):
        records = inventory.apply_inbound_file(options['path'])
        self.stdout.write(
            self.style.SUCCESS(f'{len(records)} inbound row(s) applied from {options["path"]}')
        )

    def handle_set_qty(self, inventory, options):
        record = inventory.set_quantity(
            options['model'], options['part'], options['qty'], note=options['note']
        )
        self._confirm(inventory, record)

    def handle_status(self, inventory, options):
        report = inventory.status(options.get('model'))

        if report.is_empty:
            self.stdout.write('No inventory.')
            return

        rows = [(e.model, e.part, str(e.quantity)) for e in report.entries]
        widths = [
            max(len(header), *(len(row[i]) for row in rows))
            for i, header in enumerate(('MODEL', 'PART', 'QTY'))
        ]
        self.stdout.write(self._table_row(('MODEL', 'PART', 'QTY'), widths))
        for row in rows:
            self.stdout.write(self._table_row(row, widths))

        self.stdout.write('')
        self.stdout.write('Totals by model:')
        for model, total in report.totals.items():
            self.stdout.write(f'  {model}: {total}')

    def handle_verify(self, inventory, options):
        if options['fix']:
            discrepancies = inventory.rebuild()
        else:
            discrepancies = inventory.verify()

        if not discrepancies:
            self.stdout.write(self.style.SUCCESS('Snapshot matches the transaction log'))
            return

        for d in discrepancies:
            self.stdout.write(
                f'{d.model}/{d.part}: snapshot {d.recorded}, log {d.replayed} (diff: {d.diff})'
            )
        if options['fix']:
            self.stdout.write(
                self.style.SUCCESS(f'{len(discrepancies)} stock line(s) rebuilt from the log')
            )
        else:
            raise CommandError(
                f'{len(discrepancies)} stock line(s) disagree with the log. '
                f'Run with --fix to rebuild the snapshot.'
            )

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _confirm(self, inventory, record):
        balance = inventory.quantity(record.model, record.part)
        self.stdout.write(self.style.SUCCESS(f'{record} (now {balance})'))

    def _table_row(self, values, widths):
        model, part, qty = values
        return f'{model:<{widths[0]}}  {part:<{widths[1]}}  {qty:>{widths[2]}}'
