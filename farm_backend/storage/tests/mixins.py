# storage/tests/mixins.py

from __future__ import annotations

from django.apps import apps

from storage.memory import MemoryStorage


class MemoryStorageMixin:
    """
    Run an API test case against a fresh MemoryStorage.

    Put it first in the bases so the swap happens before the test's own
    setUp touches storage. The configured backend is restored on cleanup.
    """

    def setUp(self):
        config = apps.get_app_config("storage")
        self.addCleanup(setattr, config, "storage", config.storage)
        config.storage = MemoryStorage()
        super().setUp()
