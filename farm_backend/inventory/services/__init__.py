from .stock import apply_movement, low_stock_items, post_movement, stock_status

__all__ = [
    "apply_movement",
    "low_stock_items",
    "post_movement",
    "stock_status",
]
