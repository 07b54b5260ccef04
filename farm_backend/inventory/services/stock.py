# inventory/services/stock.py

"""
======================================================
PATH: inventory/services/stock.py
======================================================
STOCK MUTATION RULES

- IN          : stock + quantity
- OUT         : stock - quantity (no floor; stock may go negative)
- ADJUSTMENT  : stock = quantity

Stock status (derived, never stored):
    ratio = current / reorder_level * 100
    ratio <= 50   -> critical
    ratio <= 100  -> low
    otherwise     -> adequate
A zero reorder level has no ratio: adequate while stock is positive,
critical otherwise.

This module must not import storage or models; storage.base calls
apply_movement() while posting.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from inventory.services.exceptions import StockOutOfRangeError, UnknownMovementTypeError
from storage.records import to_decimal

logger = logging.getLogger(__name__)

MOVEMENT_IN = "IN"
MOVEMENT_OUT = "OUT"
MOVEMENT_ADJUSTMENT = "ADJUSTMENT"

STATUS_CRITICAL = "critical"
STATUS_LOW = "low"
STATUS_ADEQUATE = "adequate"

CRITICAL_PCT = Decimal("50")
LOW_PCT = Decimal("100")

# inventory_items.current_stock is DECIMAL(10, 2)
STOCK_LIMIT = Decimal("99999999.99")


def apply_movement(current_stock, movement_type: str, quantity) -> Decimal:
    current = to_decimal(current_stock)
    qty = to_decimal(quantity)

    if movement_type == MOVEMENT_IN:
        return current + qty
    if movement_type == MOVEMENT_OUT:
        return current - qty
    if movement_type == MOVEMENT_ADJUSTMENT:
        return qty

    raise UnknownMovementTypeError(f"Unknown movement type: {movement_type!r}")


def stock_status(current_stock, reorder_level) -> str:
    current = to_decimal(current_stock)
    reorder = to_decimal(reorder_level)

    if reorder <= 0:
        return STATUS_ADEQUATE if current > 0 else STATUS_CRITICAL

    pct = current / reorder * 100
    if pct <= CRITICAL_PCT:
        return STATUS_CRITICAL
    if pct <= LOW_PCT:
        return STATUS_LOW
    return STATUS_ADEQUATE


def is_below_reorder(item: dict) -> bool:
    return to_decimal(item.get("current_stock")) <= to_decimal(item.get("reorder_level"))


def low_stock_items(*, storage) -> list[dict]:
    """Items at or below their reorder level (dashboard alerts)."""
    return [item for item in storage.list("inventory_items") if is_below_reorder(item)]


def post_movement(*, storage, movement: dict) -> dict:
    """
    Persist a movement and apply it to the item's stock.

    An unknown item_id still stores the movement; stock is left alone.
    A movement whose resulting stock would not fit current_stock raises
    StockOutOfRangeError before anything is written.
    """
    before = storage.get("inventory_items", movement["item_id"])

    new_stock = None
    if before is not None:
        new_stock = apply_movement(
            before.get("current_stock"),
            movement["movement_type"],
            movement["quantity"],
        )
        if abs(new_stock) > STOCK_LIMIT:
            raise StockOutOfRangeError(
                f"Resulting stock {new_stock} is outside the storable range "
                f"of +/-{STOCK_LIMIT}"
            )

    created = storage.create_inventory_movement(movement)

    if before is not None:
        logger.info(
            "Inventory movement %s: %s %s on item %s (stock %s -> %s)",
            created["id"],
            created["movement_type"],
            created["quantity"],
            created["item_id"],
            before.get("current_stock"),
            new_stock,
        )
    return created
