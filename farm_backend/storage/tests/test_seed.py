# storage/tests/test_seed.py

from io import StringIO

from django.contrib.auth.hashers import check_password
from django.core.management import call_command
from django.test import SimpleTestCase, TestCase

from storage import get_storage
from storage.apps import build_storage
from storage.exceptions import StorageConfigurationError
from storage.memory import MemoryStorage
from storage.seed import DEMO_USERS, FARM_CHART, seed_demo_data


class SeedDemoDataTests(SimpleTestCase):
    """
    GUARANTEES:
    - Demo users, attendance and the chart of accounts are created once
    - Passwords are stored hashed
    - Every seeded account starts at a zero balance
    """

    def setUp(self):
        self.storage = MemoryStorage()

    def test_seed_creates_users_and_chart(self):
        counts = seed_demo_data(self.storage)

        self.assertEqual(counts["users"], len(DEMO_USERS))
        self.assertEqual(len(self.storage.list("users")), len(DEMO_USERS))
        self.assertEqual(len(self.storage.list("accounts")), len(FARM_CHART))
        self.assertTrue(self.storage.list("attendance"))

    def test_seed_is_idempotent(self):
        seed_demo_data(self.storage)

        self.assertIsNone(seed_demo_data(self.storage))
        self.assertEqual(len(self.storage.list("users")), len(DEMO_USERS))

    def test_seeded_passwords_are_hashed(self):
        seed_demo_data(self.storage)
        admin = self.storage.find("users", username="admin")

        self.assertNotEqual(admin["password"], "admin")
        self.assertTrue(check_password("admin", admin["password"]))

    def test_seeded_balances_start_at_zero(self):
        seed_demo_data(self.storage)

        self.assertTrue(all(a["balance"] == 0 for a in self.storage.list("accounts")))


class BuildStorageTests(SimpleTestCase):
    def test_known_backends(self):
        self.assertEqual(build_storage("memory").backend_name, "memory")
        self.assertEqual(build_storage("database").backend_name, "database")

    def test_unknown_backend_is_rejected(self):
        with self.assertRaises(StorageConfigurationError):
            build_storage("redis")


class SeedFarmCommandTests(TestCase):
    def test_command_seeds_configured_backend_once(self):
        out = StringIO()
        call_command("seed_farm", stdout=out)
        self.assertIn("Seeded", out.getvalue())

        out = StringIO()
        call_command("seed_farm", stdout=out)
        self.assertIn("already present", out.getvalue())

        self.assertIsNotNone(get_storage().find("users", username="admin"))
