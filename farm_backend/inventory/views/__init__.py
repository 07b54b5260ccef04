"""
inventory.views package

- item.py     : items CRUD + low-stock alerts
- movement.py : append-only stock movements
"""

from .item import InventoryItemViewSet
from .movement import InventoryMovementViewSet

__all__ = [
    "InventoryItemViewSet",
    "InventoryMovementViewSet",
]
