# storage/records.py

from __future__ import annotations

import uuid
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWOPLACES = Decimal("0.01")


def new_id() -> str:
    """Primary key for every farm record (UUID4 string)."""
    return str(uuid.uuid4())


def to_decimal(value) -> Decimal:
    """
    Coerce a stored quantity/amount to Decimal.

    None / "" count as zero, matching the column defaults.
    """
    if value is None or value == "":
        return Decimal("0.00")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Invalid decimal value: {value!r}") from exc


def money(value) -> Decimal:
    return to_decimal(value).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
