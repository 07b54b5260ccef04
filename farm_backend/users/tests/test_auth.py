# users/tests/test_auth.py

from django.test import TestCase
from rest_framework.test import APIClient

from storage import get_storage


class LoginTests(TestCase):
    """
    GUARANTEES:
    - Valid credentials return the user without a password
    - Wrong password, unknown user and inactive user all get 401
    """

    def setUp(self):
        self.client = APIClient()
        self.storage = get_storage()
        self.user = self.storage.create_user(
            {
                "username": "priya",
                "password": "password",
                "full_name": "Priya Sharma",
                "role": "Operator",
                "is_active": True,
            }
        )

    def login(self, username, password):
        return self.client.post("/api/auth/login", {"username": username, "password": password})

    def test_login_success(self):
        response = self.login("priya", "password")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["id"], self.user["id"])
        self.assertEqual(response.data["fullName"], "Priya Sharma")
        self.assertNotIn("password", response.data)

    def test_wrong_password(self):
        response = self.login("priya", "wrong")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["detail"], "Invalid credentials")

    def test_unknown_user(self):
        self.assertEqual(self.login("nobody", "password").status_code, 401)

    def test_inactive_user(self):
        self.storage.update("users", self.user["id"], {"is_active": False})

        self.assertEqual(self.login("priya", "password").status_code, 401)

    def test_missing_fields(self):
        response = self.client.post("/api/auth/login", {})

        self.assertEqual(response.status_code, 400)
        self.assertIn("username", response.data)
        self.assertIn("password", response.data)


class UserApiTests(TestCase):
    """
    GUARANTEES:
    - Passwords are hashed on create and on update, never returned
    - Usernames are unique
    """

    def setUp(self):
        self.client = APIClient()

    def create(self, username="arun", **extra):
        payload = {
            "username": username,
            "password": "password",
            "fullName": "Arun Patel",
            "role": "Operator",
            **extra,
        }
        return self.client.post("/api/users", payload)

    def test_create_hides_password(self):
        response = self.create()

        self.assertEqual(response.status_code, 201)
        self.assertNotIn("password", response.data)
        stored = get_storage().get("users", response.data["id"])
        self.assertNotEqual(stored["password"], "password")

    def test_list_has_no_passwords(self):
        self.create()
        response = self.client.get("/api/users")

        self.assertTrue(all("password" not in user for user in response.data))

    def test_duplicate_username(self):
        self.create()
        response = self.create()

        self.assertEqual(response.status_code, 400)
        self.assertIn("username", response.data)

    def test_password_change_is_hashed(self):
        user = self.create().data

        self.client.patch(f"/api/users/{user['id']}", {"password": "n3w-secret"})

        login = self.client.post("/api/auth/login", {"username": "arun", "password": "n3w-secret"})
        self.assertEqual(login.status_code, 200)

    def test_invalid_role(self):
        response = self.create(role="Owner")

        self.assertEqual(response.status_code, 400)
        self.assertIn("role", response.data)


class AdminSettingApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.post(
            "/api/admin-settings",
            {
                "settingKey": "standard_work_hours",
                "settingValue": 8,
                "category": "Attendance",
            },
        )

    def test_get_by_key(self):
        response = self.client.get("/api/admin-settings/standard_work_hours")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["settingValue"], 8)

    def test_patch_value(self):
        response = self.client.patch(
            "/api/admin-settings/standard_work_hours", {"value": {"weekday": 8, "saturday": 4}}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["settingValue"], {"weekday": 8, "saturday": 4})

    def test_unknown_key(self):
        response = self.client.patch("/api/admin-settings/nope", {"value": 1})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["detail"], "Setting not found")

    def test_filter_by_category(self):
        self.assertEqual(len(self.client.get("/api/admin-settings", {"category": "Wages"}).data), 0)
        self.assertEqual(
            len(self.client.get("/api/admin-settings", {"category": "Attendance"}).data), 1
        )
