# storage/base.py
"""
======================================================
PATH: storage/base.py
======================================================
FARM STORAGE INTERFACE

One capability interface, two implementations selected at startup:
- storage.memory.MemoryStorage     (dict per resource, process lifetime)
- storage.database.DatabaseStorage (Django ORM)

Records cross this boundary as plain dicts with snake_case keys, an "id"
(UUID string) and the resource timestamp.

Posting rules shared by both backends live here:
- journal posting: persist entry, then per line persist + add (debit - credit)
  to the account balance. No debit == credit check, no rollback.
- movement posting: persist movement, then recompute the item's stock
  (IN adds, OUT subtracts with no floor, ADJUSTMENT sets verbatim).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from django.contrib.auth.hashers import check_password, make_password

from accounting.services.ledger import line_delta
from inventory.services.stock import apply_movement, is_below_reorder

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class FarmStorage(ABC):
    backend_name = "abstract"

    # =====================================================
    # GENERIC CRUD
    # =====================================================
    @abstractmethod
    def list(
        self,
        resource: str,
        filters: Optional[dict] = None,
        date_field: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[Record]:
        """Records matching every equality filter and the inclusive date range."""

    @abstractmethod
    def get(self, resource: str, record_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    def create(self, resource: str, data: dict) -> Record:
        ...

    @abstractmethod
    def update(self, resource: str, record_id: str, changes: dict) -> Optional[Record]:
        """Apply a partial update. Returns None (and changes nothing) for a missing id."""

    @abstractmethod
    def delete(self, resource: str, record_id: str) -> bool:
        ...

    def find(self, resource: str, **filters) -> Optional[Record]:
        rows = self.list(resource, filters=filters)
        return rows[0] if rows else None

    # =====================================================
    # LEDGER POSTING
    # =====================================================
    @abstractmethod
    def _increment_balance(self, account_id: str, delta: Decimal) -> bool:
        """Add delta to the account balance. Returns False when the account is unknown."""

    def create_journal_entry(self, entry: dict, lines: list[dict]) -> Record:
        created = self.create("journal_entries", entry)

        for number, line in enumerate(lines, start=1):
            self.create(
                "journal_lines",
                {
                    **line,
                    "journal_entry_id": created["id"],
                    "line_number": number,
                },
            )
            delta = line_delta(line)
            if not self._increment_balance(line["account_id"], delta):
                logger.warning(
                    "Journal entry %s line %s references unknown account %s; "
                    "balance delta %s skipped",
                    created["id"],
                    number,
                    line["account_id"],
                    delta,
                )

        return created

    def journal_lines(self, entry_id: str) -> list[Record]:
        return self.list("journal_lines", filters={"journal_entry_id": entry_id})

    # =====================================================
    # STOCK POSTING
    # =====================================================
    def create_inventory_movement(self, movement: dict) -> Record:
        created = self.create("inventory_movements", movement)

        item = self.get("inventory_items", created["item_id"])
        if item is None:
            logger.warning(
                "Inventory movement %s references unknown item %s; stock unchanged",
                created["id"],
                created["item_id"],
            )
            return created

        new_stock = apply_movement(
            item.get("current_stock"),
            created["movement_type"],
            created["quantity"],
        )
        self.update("inventory_items", item["id"], {"current_stock": new_stock})
        return created

    # =====================================================
    # USERS
    # =====================================================
    def create_user(self, data: dict) -> Record:
        payload = dict(data)
        payload["password"] = make_password(payload["password"])
        return self.create("users", payload)

    def verify_credentials(self, username: str, password: str) -> Optional[Record]:
        """
        Resolve a login attempt.

        Returns None for an unknown username, a wrong password or an inactive user.
        """
        user = self.find("users", username=username)
        if user is None or not check_password(password, user.get("password") or ""):
            return None
        if not user.get("is_active", True):
            return None
        return user

    # =====================================================
    # DASHBOARD
    # =====================================================
    def dashboard_stats(self) -> dict[str, int]:
        alerts = sum(1 for item in self.list("inventory_items") if is_below_reorder(item))
        return {
            "total_plots": len(self.list("plots")),
            "total_employees": len(self.list("users")),
            "total_animals": len(self.list("animals")),
            "inventory_alerts": alerts,
        }
