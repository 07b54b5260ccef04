"""
PATH: inventory/models/__init__.py

Inventory models export surface.
"""

from .item import InventoryItem
from .movement import InventoryMovement

__all__ = [
    "InventoryItem",
    "InventoryMovement",
]
