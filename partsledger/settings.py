"""
Standalone settings for running PartsLedger without a host project.

Used by the ``partsledger`` console script and by the test suite.
Projects that install the app in INSTALLED_APPS use their own settings
and only need a PARTSLEDGER dict (see partsledger.conf).

Environment:
    PARTSLEDGER_DATA_DIR   Directory for the CSV files (default: ./data)
    PARTSLEDGER_TIME_ZONE  Zone used for transaction timestamps (default: UTC)
    PARTSLEDGER_LOG_LEVEL  Level for the partsledger logger (default: WARNING)
"""

import os

SECRET_KEY = 'partsledger-standalone'

DEBUG = False

INSTALLED_APPS = [
    'partsledger',
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = os.environ.get('PARTSLEDGER_TIME_ZONE', 'UTC')

PARTSLEDGER = {
    'DATA_DIR': os.environ.get('PARTSLEDGER_DATA_DIR', 'data'),
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'partsledger': {
            'handlers': ['console'],
            'level': os.environ.get('PARTSLEDGER_LOG_LEVEL', 'WARNING'),
            'propagate': True,
        },
    },
}
