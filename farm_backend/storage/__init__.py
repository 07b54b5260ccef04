# storage/__init__.py
"""
Farm storage layer.

The configured backend (memory or database) is built once in
StorageConfig.ready() and lives on the app config for the life of the process.
"""


def get_storage():
    """Return the storage backend selected at startup."""
    from django.apps import apps

    return apps.get_app_config("storage").storage
