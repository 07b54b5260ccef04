# dashboard/tests/test_stats.py

from django.test import TestCase
from rest_framework.test import APIClient

from storage import get_storage


class DashboardStatsTests(TestCase):
    """
    GUARANTEES:
    - Counts reflect the stored plots, users and animals
    - inventoryAlerts counts items at or below their reorder level
    """

    def setUp(self):
        self.client = APIClient()
        storage = get_storage()
        storage.create(
            "plots",
            {
                "name": "Plot A",
                "location": "North",
                "area": "2",
                "variety": "Grand Naine",
                "planting_date": "2024-01-01",
            },
        )
        storage.create_user(
            {"username": "meena", "password": "password", "full_name": "Meena", "role": "Operator"}
        )
        for name, stock, reorder in (("NPK", "25", "100"), ("Urea", "100", "100"), ("Diesel", "500", "100")):
            storage.create(
                "inventory_items",
                {
                    "name": name,
                    "category": "Fertilizer",
                    "unit": "kg",
                    "current_stock": stock,
                    "reorder_level": reorder,
                },
            )

    def test_stats(self):
        response = self.client.get("/api/dashboard/stats")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.data,
            {"totalPlots": 1, "totalEmployees": 1, "totalAnimals": 0, "inventoryAlerts": 2},
        )
