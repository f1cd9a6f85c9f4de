"""
Test settings for the catalog project.

Uses an in-memory SQLite database and a throwaway storage root so the
suite runs without PostgreSQL.
"""

import tempfile
from pathlib import Path

from .base import *

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGE_ROOT = Path(tempfile.mkdtemp(prefix='catalog-storage-'))
STORAGES = {
    **STORAGES,
    'importations': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
        'OPTIONS': {
            'location': STORAGE_ROOT / 'app',
        },
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'root': {
        'handlers': ['null'],
    },
}
