import importlib
import os
from unittest import mock

from django.test import SimpleTestCase

from catalog.settings import base


class StorageRootSettingTest(SimpleTestCase):
    """STORAGE_ROOT does not depend on the working directory"""

    def load_base(self, **environ):
        with mock.patch.dict(os.environ, environ):
            module = importlib.reload(base)
        self.addCleanup(importlib.reload, base)
        return module

    def test_relative_storage_root_resolves_against_base_dir(self):
        settings = self.load_base(STORAGE_ROOT='./storage')
        self.assertTrue(settings.STORAGE_ROOT.is_absolute())
        self.assertEqual(settings.STORAGE_ROOT, settings.BASE_DIR / 'storage')
        self.assertEqual(
            settings.STORAGES['importations']['OPTIONS']['location'],
            settings.BASE_DIR / 'storage' / 'app'
        )

    def test_absolute_storage_root_kept(self):
        settings = self.load_base(STORAGE_ROOT='/srv/catalog/storage')
        self.assertEqual(str(settings.STORAGE_ROOT), '/srv/catalog/storage')
