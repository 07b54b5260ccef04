from .item import InventoryItemSerializer
from .movement import InventoryMovementSerializer

__all__ = [
    "InventoryItemSerializer",
    "InventoryMovementSerializer",
]
