"""
``partsledger`` console script.

Runs the ``inventory`` management command with the bundled standalone
settings, so operators do not need a Django project:

    partsledger init
    partsledger add-inbound X1 P1 10 --note "Delivery #42"
    partsledger --data-dir /srv/stock status --model X1
"""

import os
import sys


def main(argv=None):
    """Console entry point."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'partsledger.settings')

    from django.core.management import execute_from_command_line

    args = sys.argv[1:] if argv is None else list(argv)
    execute_from_command_line(['partsledger', 'inventory', *args])


if __name__ == '__main__':
    main()
