"""
Django settings for the catalog project.

This package contains environment-specific settings:
- base.py: Common settings for all environments
- dev.py: Development environment settings
- prod.py: Production environment settings
- test.py: Settings used by the test suite

Usage:
    Set DJANGO_SETTINGS_MODULE environment variable:
    - Development: catalog.settings.dev
    - Production: catalog.settings.prod
    - Tests: catalog.settings.test
"""

import os

# Default to development settings if not specified
environment = os.getenv('DJANGO_ENV', 'dev')

if environment == 'prod':
    from .prod import *
else:
    from .dev import *
