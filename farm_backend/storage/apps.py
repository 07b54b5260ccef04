# storage/apps.py

from __future__ import annotations

import logging

from django.apps import AppConfig
from django.conf import settings

from storage.exceptions import StorageConfigurationError

logger = logging.getLogger(__name__)


def build_storage(backend_name: str):
    """Instantiate the backend named by FARM_STORAGE_BACKEND."""
    from storage.database import DatabaseStorage
    from storage.memory import MemoryStorage

    backends = {
        MemoryStorage.backend_name: MemoryStorage,
        DatabaseStorage.backend_name: DatabaseStorage,
    }
    try:
        return backends[backend_name]()
    except KeyError as exc:
        raise StorageConfigurationError(
            f"FARM_STORAGE_BACKEND must be one of {sorted(backends)}, got {backend_name!r}"
        ) from exc


class StorageConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "storage"
    verbose_name = "Farm Storage"

    storage = None

    def ready(self):
        self.storage = build_storage(settings.FARM_STORAGE_BACKEND)
        logger.info("Farm storage backend: %s", self.storage.backend_name)

        # The database backend is seeded explicitly (manage.py seed_farm);
        # touching the DB from ready() would run before migrations.
        if self.storage.backend_name == "memory" and settings.FARM_SEED_DEMO_DATA:
            from storage.seed import seed_demo_data

            seed_demo_data(self.storage)
