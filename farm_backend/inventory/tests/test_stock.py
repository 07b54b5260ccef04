# inventory/tests/test_stock.py

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from inventory.services.exceptions import StockOutOfRangeError, UnknownMovementTypeError
from inventory.services.stock import apply_movement, post_movement, stock_status
from storage import get_storage
from storage.tests.mixins import MemoryStorageMixin


class StockRuleTests(SimpleTestCase):
    """
    GUARANTEES:
    - IN adds, OUT subtracts (no floor), ADJUSTMENT replaces
    - Stock status is derived from the stock / reorder-level ratio
    """

    def test_apply_movement(self):
        self.assertEqual(apply_movement("25", "IN", "10"), Decimal("35"))
        self.assertEqual(apply_movement("25", "OUT", "30"), Decimal("-5"))
        self.assertEqual(apply_movement("25", "ADJUSTMENT", "7"), Decimal("7"))
        self.assertEqual(apply_movement(None, "IN", "3"), Decimal("3"))

    def test_unknown_movement_type(self):
        with self.assertRaises(UnknownMovementTypeError):
            apply_movement("25", "TRANSFER", "1")

    def test_stock_status_thresholds(self):
        self.assertEqual(stock_status("50", "100"), "critical")
        self.assertEqual(stock_status("51", "100"), "low")
        self.assertEqual(stock_status("100", "100"), "low")
        self.assertEqual(stock_status("101", "100"), "adequate")

    def test_zero_reorder_level(self):
        self.assertEqual(stock_status("5", "0"), "adequate")
        self.assertEqual(stock_status("0", "0"), "critical")


class InventoryApiTests(TestCase):
    """
    Items and movements through the API.

    GUARANTEES:
    - Posting a movement updates the item's current stock
    - Movements on unknown items are stored without side effects
    - Items report a derived stockStatus
    - A movement that would overflow current stock is refused with 400
    """

    def setUp(self):
        self.client = APIClient()
        self.npk = self.client.post(
            "/api/inventory",
            {
                "name": "NPK 19:19:19",
                "category": "Fertilizer",
                "unit": "kg",
                "currentStock": "25",
                "reorderLevel": "100",
            },
        ).data

    def move(self, movement_type, quantity, item_id=None):
        return self.client.post(
            "/api/inventory-movements",
            {
                "itemId": item_id or self.npk["id"],
                "movementType": movement_type,
                "quantity": quantity,
                "date": "2024-03-01",
            },
        )

    def item(self):
        return self.client.get(f"/api/inventory/{self.npk['id']}").data

    def test_item_created_with_status(self):
        self.assertEqual(self.npk["currentStock"], "25.00")
        self.assertEqual(self.npk["stockStatus"], "critical")

    def test_out_movement_keeps_critical_status(self):
        response = self.move("OUT", "5")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.item()["currentStock"], "20.00")
        self.assertEqual(self.item()["stockStatus"], "critical")

    def test_in_movement_restocks(self):
        self.move("IN", "75")

        item = self.item()
        self.assertEqual(item["currentStock"], "100.00")
        self.assertEqual(item["stockStatus"], "low")

    def test_out_may_drive_stock_negative(self):
        self.move("OUT", "30")
        self.assertEqual(self.item()["currentStock"], "-5.00")

    def test_adjustment_sets_stock(self):
        self.move("ADJUSTMENT", "400")

        item = self.item()
        self.assertEqual(item["currentStock"], "400.00")
        self.assertEqual(item["stockStatus"], "adequate")

    def test_unknown_item_movement_is_stored(self):
        response = self.move("IN", "10", item_id="ghost-item")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.item()["currentStock"], "25.00")
        listed = self.client.get("/api/inventory-movements", {"itemId": "ghost-item"}).data
        self.assertEqual(len(listed), 1)

    def test_invalid_movement_persists_nothing(self):
        response = self.move("TRANSFER", "-1")

        self.assertEqual(response.status_code, 400)
        self.assertIn("movementType", response.data)
        self.assertIn("quantity", response.data)
        self.assertEqual(self.client.get("/api/inventory-movements").data, [])
        self.assertEqual(self.item()["currentStock"], "25.00")

    def test_movements_are_append_only(self):
        movement = self.move("IN", "1").data

        response = self.client.delete(f"/api/inventory-movements/{movement['id']}")
        self.assertEqual(response.status_code, 405)

    def test_alerts_list_items_at_or_below_reorder(self):
        self.client.post(
            "/api/inventory",
            {"name": "Diesel", "category": "Fuel", "unit": "liters", "currentStock": "500", "reorderLevel": "100"},
        )

        alerts = self.client.get("/api/inventory/alerts").data

        self.assertEqual([item["name"] for item in alerts], ["NPK 19:19:19"])

    def test_item_crud(self):
        patched = self.client.patch(f"/api/inventory/{self.npk['id']}", {"location": "Store A"})
        self.assertEqual(patched.data["location"], "Store A")
        self.assertEqual(patched.data["name"], "NPK 19:19:19")

        self.assertEqual(self.client.delete(f"/api/inventory/{self.npk['id']}").status_code, 204)
        self.assertEqual(self.client.get(f"/api/inventory/{self.npk['id']}").status_code, 404)

    def test_overflowing_in_movement_is_refused(self):
        full = self.client.post(
            "/api/inventory",
            {
                "name": "Silage",
                "category": "Feed",
                "unit": "kg",
                "currentStock": "99999999.00",
                "reorderLevel": "100",
            },
        ).data

        response = self.move("IN", "99999999.00", item_id=full["id"])

        self.assertEqual(response.status_code, 400)
        self.assertIn("quantity", response.data)
        self.assertEqual(self.client.get("/api/inventory-movements").data, [])
        detail = self.client.get(f"/api/inventory/{full['id']}")
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.data["currentStock"], "99999999.00")
        self.assertEqual(self.client.get("/api/inventory").status_code, 200)

    def test_movement_up_to_the_stock_limit_is_accepted(self):
        response = self.move("ADJUSTMENT", "99999999.99")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.item()["currentStock"], "99999999.99")


class MemoryInventoryApiTests(MemoryStorageMixin, InventoryApiTests):
    """Same API guarantees on the in-memory backend."""


class PostMovementTests(TestCase):
    """
    GUARANTEES:
    - Resulting stock beyond +/-99999999.99 is refused before anything is written
    - Stock landing exactly on the limit is accepted
    """

    def setUp(self):
        self.storage = get_storage()
        self.item = self.storage.create(
            "inventory_items",
            {
                "name": "Diesel",
                "category": "Fuel",
                "unit": "liters",
                "current_stock": Decimal("-10.00"),
                "reorder_level": Decimal("100.00"),
            },
        )

    def movement(self, movement_type, quantity):
        return {
            "item_id": self.item["id"],
            "movement_type": movement_type,
            "quantity": Decimal(quantity),
            "date": date(2024, 3, 1),
        }

    def stock(self):
        return self.storage.get("inventory_items", self.item["id"])["current_stock"]

    def test_out_of_range_stock_is_refused(self):
        with self.assertRaises(StockOutOfRangeError):
            post_movement(storage=self.storage, movement=self.movement("OUT", "99999999.99"))

        self.assertEqual(self.storage.list("inventory_movements"), [])
        self.assertEqual(self.stock(), Decimal("-10.00"))

    def test_stock_on_the_limit_is_accepted(self):
        post_movement(storage=self.storage, movement=self.movement("OUT", "99999989.99"))

        self.assertEqual(self.stock(), Decimal("-99999999.99"))


class MemoryPostMovementTests(MemoryStorageMixin, PostMovementTests):
    """Same range rules on the in-memory backend."""
