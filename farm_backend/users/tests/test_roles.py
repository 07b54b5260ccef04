# users/tests/test_roles.py

from django.test import SimpleTestCase, TestCase, override_settings
from rest_framework.test import APIClient

from permissions.roles import ROLE_RANKS, has_role, role_rank
from storage import get_storage
from users.models import User


class RoleHierarchyTests(SimpleTestCase):
    def test_ranks(self):
        self.assertEqual(role_rank("Admin"), 5)
        self.assertEqual(role_rank("Viewer"), 1)
        self.assertEqual(role_rank("Owner"), 0)
        self.assertEqual(role_rank(None), 0)

    def test_has_role(self):
        self.assertTrue(has_role("Admin", "Manager"))
        self.assertTrue(has_role("Operator", "Operator"))
        self.assertFalse(has_role("Viewer", "Operator"))
        self.assertFalse(has_role(None, "Viewer"))

    def test_ranks_cover_user_role_choices(self):
        self.assertEqual(set(ROLE_RANKS), set(User.Role.values))


class RoleEnforcementTests(TestCase):
    """
    GUARANTEES:
    - With enforcement off, anyone may write
    - With enforcement on, writes need Operator, deletes need Manager,
      user writes need Admin
    - Reads are always allowed
    """

    def setUp(self):
        self.client = APIClient()
        storage = get_storage()
        self.ids = {
            role: storage.create_user(
                {
                    "username": role.lower(),
                    "password": "password",
                    "full_name": role,
                    "role": role,
                    "is_active": True,
                }
            )["id"]
            for role in ("Admin", "Manager", "Operator", "Viewer")
        }

    def create_plot(self, **headers):
        return self.client.post(
            "/api/plots",
            {
                "name": "Plot C",
                "location": "East",
                "area": "1",
                "variety": "Nendran",
                "plantingDate": "2024-01-01",
            },
            **headers,
        )

    def test_writes_open_when_enforcement_off(self):
        self.assertEqual(self.create_plot().status_code, 201)

    @override_settings(FARM_ENFORCE_ROLES=True)
    def test_anonymous_write_is_refused(self):
        self.assertIn(self.create_plot().status_code, (401, 403))
        self.assertEqual(self.client.get("/api/plots").status_code, 200)

    @override_settings(FARM_ENFORCE_ROLES=True)
    def test_viewer_cannot_write(self):
        response = self.create_plot(HTTP_X_USER_ID=self.ids["Viewer"])
        self.assertEqual(response.status_code, 403)

    @override_settings(FARM_ENFORCE_ROLES=True)
    def test_operator_writes_but_cannot_delete(self):
        plot = self.create_plot(HTTP_X_USER_ID=self.ids["Operator"])
        self.assertEqual(plot.status_code, 201)

        url = f"/api/plots/{plot.data['id']}"
        self.assertEqual(
            self.client.delete(url, HTTP_X_USER_ID=self.ids["Operator"]).status_code, 403
        )
        self.assertEqual(
            self.client.delete(url, HTTP_X_USER_ID=self.ids["Manager"]).status_code, 204
        )

    @override_settings(FARM_ENFORCE_ROLES=True)
    def test_user_admin_needs_admin(self):
        payload = {"username": "new", "password": "pw", "fullName": "New", "role": "Viewer"}

        manager = self.client.post("/api/users", payload, HTTP_X_USER_ID=self.ids["Manager"])
        admin = self.client.post("/api/users", payload, HTTP_X_USER_ID=self.ids["Admin"])

        self.assertEqual(manager.status_code, 403)
        self.assertEqual(admin.status_code, 201)

    @override_settings(FARM_ENFORCE_ROLES=True)
    def test_inactive_user_is_anonymous(self):
        get_storage().update("users", self.ids["Admin"], {"is_active": False})

        response = self.create_plot(HTTP_X_USER_ID=self.ids["Admin"])
        self.assertIn(response.status_code, (401, 403))
