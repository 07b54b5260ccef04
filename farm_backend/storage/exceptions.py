# storage/exceptions.py

"""
STORAGE ERRORS

Centralized errors for the storage layer.
"""


class StorageError(Exception):
    """Base exception for all storage failures."""


class UnknownResourceError(StorageError):
    """Raised when a resource name is not registered."""


class StorageConfigurationError(StorageError):
    """Raised when FARM_STORAGE_BACKEND names an unsupported backend."""
