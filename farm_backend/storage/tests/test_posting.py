# storage/tests/test_posting.py

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.test import TestCase

from storage.database import DatabaseStorage
from storage.memory import MemoryStorage


class PostingContract:
    """
    Posting rules shared by every storage backend.

    GUARANTEES:
    - A journal line adds (debit - credit) to its account balance
    - Reposting the same lines doubles the effect
    - A line naming an unknown account is stored; no balance moves
    - IN adds, OUT subtracts with no floor, ADJUSTMENT sets the value
    - A movement on an unknown item is stored; no stock changes
    """

    def make_storage(self):
        raise NotImplementedError

    def setUp(self):
        self.storage = self.make_storage()
        self.cash = self.storage.create(
            "accounts",
            {
                "account_code": "1000",
                "account_name": "Cash",
                "account_type": "Asset",
                "balance": Decimal("0.00"),
                "is_active": True,
            },
        )
        self.milk = self.storage.create(
            "accounts",
            {
                "account_code": "4000",
                "account_name": "Milk Sales Revenue",
                "account_type": "Revenue",
                "balance": Decimal("0.00"),
                "is_active": True,
            },
        )
        self.npk = self.storage.create(
            "inventory_items",
            {
                "name": "NPK 19:19:19",
                "category": "Fertilizer",
                "unit": "kg",
                "current_stock": Decimal("25.00"),
                "reorder_level": Decimal("100.00"),
            },
        )

    # -------------------------
    # helpers
    # -------------------------
    def entry(self, description="Milk sales for the week"):
        return {
            "entry_date": date(2024, 3, 1),
            "description": description,
            "reference": "MS-001",
            "created_by": "user-1",
        }

    def milk_sale_lines(self, amount="35000.00"):
        return [
            {"account_id": self.cash["id"], "debit": Decimal(amount), "credit": Decimal("0")},
            {"account_id": self.milk["id"], "debit": Decimal("0"), "credit": Decimal(amount)},
        ]

    def balance(self, account):
        return self.storage.get("accounts", account["id"])["balance"]

    def stock(self):
        return self.storage.get("inventory_items", self.npk["id"])["current_stock"]

    def move(self, movement_type, quantity, item_id=None):
        return self.storage.create_inventory_movement(
            {
                "item_id": item_id or self.npk["id"],
                "movement_type": movement_type,
                "quantity": Decimal(quantity),
                "date": date(2024, 3, 1),
            }
        )

    # -------------------------
    # journal posting
    # -------------------------
    def test_journal_entry_moves_both_balances(self):
        self.storage.create_journal_entry(self.entry(), self.milk_sale_lines())

        self.assertEqual(self.balance(self.cash), Decimal("35000"))
        self.assertEqual(self.balance(self.milk), Decimal("-35000"))

    def test_lines_are_numbered_in_posting_order(self):
        created = self.storage.create_journal_entry(self.entry(), self.milk_sale_lines())

        lines = self.storage.journal_lines(created["id"])
        self.assertEqual([line["line_number"] for line in lines], [1, 2])
        self.assertEqual(lines[0]["account_id"], self.cash["id"])
        self.assertTrue(all(line["journal_entry_id"] == created["id"] for line in lines))

    def test_reposting_doubles_the_effect(self):
        self.storage.create_journal_entry(self.entry(), self.milk_sale_lines())
        self.storage.create_journal_entry(self.entry(), self.milk_sale_lines())

        self.assertEqual(self.balance(self.cash), Decimal("70000"))
        self.assertEqual(self.balance(self.milk), Decimal("-70000"))
        self.assertEqual(len(self.storage.list("journal_entries")), 2)

    def test_unknown_account_line_is_stored_without_balance_change(self):
        lines = [
            {"account_id": self.cash["id"], "debit": Decimal("500"), "credit": Decimal("0")},
            {"account_id": "missing-account", "debit": Decimal("0"), "credit": Decimal("500")},
        ]

        with self.assertLogs("storage.base", level="WARNING"):
            created = self.storage.create_journal_entry(self.entry(), lines)

        self.assertEqual(len(self.storage.journal_lines(created["id"])), 2)
        self.assertEqual(self.balance(self.cash), Decimal("500"))

    def test_unbalanced_entry_is_still_applied(self):
        lines = [
            {"account_id": self.cash["id"], "debit": Decimal("100"), "credit": Decimal("0")},
        ]
        self.storage.create_journal_entry(self.entry(), lines)

        self.assertEqual(self.balance(self.cash), Decimal("100"))

    # -------------------------
    # stock posting
    # -------------------------
    def test_in_adds_to_stock(self):
        self.move("IN", "75")
        self.assertEqual(self.stock(), Decimal("100"))

    def test_out_subtracts_from_stock(self):
        self.move("OUT", "5")
        self.assertEqual(self.stock(), Decimal("20"))

    def test_out_has_no_floor(self):
        self.move("OUT", "40")
        self.assertEqual(self.stock(), Decimal("-15"))

    def test_adjustment_sets_stock(self):
        self.move("IN", "10")
        self.move("ADJUSTMENT", "60")
        self.assertEqual(self.stock(), Decimal("60"))

    def test_unknown_item_movement_is_stored_only(self):
        with self.assertLogs("storage.base", level="WARNING"):
            created = self.move("IN", "10", item_id="missing-item")

        self.assertIsNotNone(self.storage.get("inventory_movements", created["id"]))
        self.assertEqual(self.stock(), Decimal("25"))


class MemoryPostingTests(PostingContract, TestCase):
    def make_storage(self):
        return MemoryStorage()


class DatabasePostingTests(PostingContract, TestCase):
    def make_storage(self):
        return DatabaseStorage()
