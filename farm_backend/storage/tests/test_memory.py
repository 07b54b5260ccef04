# storage/tests/test_memory.py

from datetime import date

from django.test import SimpleTestCase

from storage.exceptions import UnknownResourceError
from storage.memory import MemoryStorage


class MemoryStorageTests(SimpleTestCase):
    """
    In-memory backend behaviour.

    GUARANTEES:
    - Lists keep insertion order and honour filters + inclusive date ranges
    - Returned records are copies
    - Partial update of a missing id changes nothing
    - Unknown resource names are rejected
    """

    def setUp(self):
        self.storage = MemoryStorage()

    def add_attendance(self, user_id, day, status="Present"):
        return self.storage.create(
            "attendance", {"user_id": user_id, "date": day, "status": status}
        )

    def test_create_assigns_id_and_timestamp(self):
        record = self.add_attendance("u1", date(2024, 3, 1))

        self.assertTrue(record["id"])
        self.assertIsNotNone(record["created_at"])

    def test_list_keeps_insertion_order_and_filters(self):
        first = self.add_attendance("u1", date(2024, 3, 1))
        self.add_attendance("u2", date(2024, 3, 1))
        third = self.add_attendance("u1", date(2024, 3, 2))

        rows = self.storage.list("attendance", filters={"user_id": "u1"})
        self.assertEqual([r["id"] for r in rows], [first["id"], third["id"]])

    def test_date_range_is_inclusive(self):
        for day in (1, 5, 10, 15):
            self.add_attendance("u1", date(2024, 3, day))

        rows = self.storage.list(
            "attendance",
            date_field="date",
            start=date(2024, 3, 5),
            end=date(2024, 3, 10),
        )
        self.assertEqual([r["date"].day for r in rows], [5, 10])

    def test_returned_records_are_copies(self):
        record = self.add_attendance("u1", date(2024, 3, 1))
        record["status"] = "Absent"

        self.assertEqual(self.storage.get("attendance", record["id"])["status"], "Present")

    def test_partial_update_keeps_other_fields(self):
        record = self.add_attendance("u1", date(2024, 3, 1))

        updated = self.storage.update("attendance", record["id"], {"status": "Late"})

        self.assertEqual(updated["status"], "Late")
        self.assertEqual(updated["user_id"], "u1")
        self.assertEqual(updated["id"], record["id"])

    def test_update_missing_id_returns_none(self):
        self.assertIsNone(self.storage.update("attendance", "nope", {"status": "Late"}))
        self.assertEqual(self.storage.list("attendance"), [])

    def test_delete(self):
        record = self.add_attendance("u1", date(2024, 3, 1))

        self.assertTrue(self.storage.delete("attendance", record["id"]))
        self.assertFalse(self.storage.delete("attendance", record["id"]))
        self.assertIsNone(self.storage.get("attendance", record["id"]))

    def test_touch_resources_refresh_their_timestamp(self):
        setting = self.storage.create(
            "admin_settings",
            {"setting_key": "work_hours", "setting_value": 8, "category": "Attendance"},
        )

        updated = self.storage.update("admin_settings", setting["id"], {"setting_value": 9})

        self.assertGreaterEqual(updated["updated_at"], setting["updated_at"])
        self.assertNotIn("created_at", updated)

    def test_unknown_resource_is_rejected(self):
        with self.assertRaises(UnknownResourceError):
            self.storage.list("harvests")

    def test_stores_are_independent(self):
        self.add_attendance("u1", date(2024, 3, 1))
        self.assertEqual(MemoryStorage().list("attendance"), [])
