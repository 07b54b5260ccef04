# inventory/services/exceptions.py

"""
INVENTORY SERVICE ERRORS
"""


class InventoryServiceError(Exception):
    """Base exception for inventory service failures."""


class UnknownMovementTypeError(InventoryServiceError):
    """Raised when a movement type is not IN / OUT / ADJUSTMENT."""


class StockOutOfRangeError(InventoryServiceError):
    """Raised when a movement would push stock past what the column can store."""
