# livestock/tests/test_livestock.py

from django.test import TestCase
from rest_framework.test import APIClient


class AnimalApiTests(TestCase):
    """
    GUARANTEES:
    - Tag numbers are unique
    - Milk yield total defaults to morning + evening
    - Milk yields filter by animal and inclusive date range
    """

    def setUp(self):
        self.client = APIClient()
        self.cow = self.client.post(
            "/api/animals",
            {"tagNumber": "COW-001", "name": "Lakshmi", "type": "Cow", "gender": "Female"},
        ).data

    def yield_for(self, date, **values):
        return self.client.post(
            "/api/milk-yields", {"animalId": self.cow["id"], "date": date, **values}
        )

    def test_duplicate_tag_is_rejected(self):
        response = self.client.post(
            "/api/animals", {"tagNumber": "COW-001", "type": "Cow", "gender": "Female"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("tagNumber", response.data)

    def test_mark_sold(self):
        response = self.client.patch(f"/api/animals/{self.cow['id']}", {"status": "Sold"})

        self.assertEqual(response.data["status"], "Sold")
        self.assertEqual(response.data["tagNumber"], "COW-001")

    def test_total_yield_is_computed(self):
        response = self.yield_for("2024-03-01", morningYield="6.5", eveningYield="5.25")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["totalYield"], "11.75")

    def test_total_yield_required_without_sessions(self):
        response = self.yield_for("2024-03-01", morningYield="6.5")

        self.assertEqual(response.status_code, 400)
        self.assertIn("totalYield", response.data)

    def test_yield_date_range(self):
        for day in ("2024-03-01", "2024-03-02", "2024-03-03"):
            self.yield_for(day, totalYield="10")

        response = self.client.get(
            "/api/milk-yields",
            {"animalId": self.cow["id"], "startDate": "2024-03-02", "endDate": "2024-03-02"},
        )

        self.assertEqual([y["date"] for y in response.data], ["2024-03-02"])

    def test_health_records_and_sales(self):
        health = self.client.post(
            "/api/health-records",
            {
                "animalId": self.cow["id"],
                "date": "2024-03-01",
                "recordType": "Vaccination",
                "description": "FMD vaccine",
            },
        )
        sale = self.client.post(
            "/api/animal-sales",
            {"animalId": self.cow["id"], "saleDate": "2024-06-01", "salePrice": "65000"},
        )

        self.assertEqual(health.status_code, 201)
        self.assertEqual(sale.status_code, 201)
        self.assertEqual(sale.data["salePrice"], "65000.00")
        self.assertEqual(
            len(self.client.get("/api/health-records", {"animalId": self.cow["id"]}).data), 1
        )
