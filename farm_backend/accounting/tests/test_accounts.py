# accounting/tests/test_accounts.py

from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from accounting.services.ledger import balances_by_type, line_delta, summarize_lines


class LedgerArithmeticTests(SimpleTestCase):
    def test_line_delta_is_debit_minus_credit(self):
        self.assertEqual(line_delta({"debit": "100", "credit": "40"}), Decimal("60"))
        self.assertEqual(line_delta({"credit": "35000"}), Decimal("-35000"))

    def test_summarize_lines(self):
        totals = summarize_lines(
            [{"debit": "10.005", "credit": "0"}, {"debit": "0", "credit": "10.01"}]
        )
        self.assertEqual(totals["debit"], Decimal("10.01"))
        self.assertTrue(totals["balanced"])

    def test_balances_by_type_includes_every_type(self):
        summary = balances_by_type(
            [
                {"account_type": "Asset", "balance": Decimal("500")},
                {"account_type": "Asset", "balance": Decimal("250")},
                {"account_type": "Revenue", "balance": Decimal("-750"), "is_active": False},
            ],
            active_only=True,
        )

        self.assertEqual(summary["totals"]["Asset"], Decimal("750.00"))
        self.assertEqual(summary["totals"]["Revenue"], Decimal("0.00"))
        self.assertEqual(summary["totals"]["Expense"], Decimal("0.00"))
        self.assertEqual(summary["account_count"], 2)


class AccountApiTests(TestCase):
    """
    GUARANTEES:
    - Account codes are unique
    - balance is never writable through the API
    - Accounts can be deactivated but not deleted
    """

    def setUp(self):
        self.client = APIClient()
        self.cash = self.client.post(
            "/api/accounts",
            {"accountCode": "1000", "accountName": "Cash", "accountType": "Asset"},
        ).data

    def test_duplicate_account_code_is_rejected(self):
        response = self.client.post(
            "/api/accounts",
            {"accountCode": "1000", "accountName": "Petty Cash", "accountType": "Asset"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("accountCode", response.data)

    def test_account_may_keep_its_own_code_on_update(self):
        response = self.client.patch(
            f"/api/accounts/{self.cash['id']}",
            {"accountCode": "1000", "accountName": "Cash in Hand"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["accountName"], "Cash in Hand")

    def test_balance_is_read_only(self):
        created = self.client.post(
            "/api/accounts",
            {
                "accountCode": "1100",
                "accountName": "Bank",
                "accountType": "Asset",
                "balance": "9999.00",
            },
        ).data
        self.assertEqual(created["balance"], "0.00")

        patched = self.client.patch(f"/api/accounts/{created['id']}", {"balance": "10.00"})
        self.assertEqual(patched.data["balance"], "0.00")

    def test_invalid_account_type(self):
        response = self.client.post(
            "/api/accounts",
            {"accountCode": "9000", "accountName": "Misc", "accountType": "Income"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("accountType", response.data)

    def test_filter_by_account_type(self):
        self.client.post(
            "/api/accounts",
            {"accountCode": "4000", "accountName": "Milk Sales", "accountType": "Revenue"},
        )

        response = self.client.get("/api/accounts", {"accountType": "Revenue"})

        self.assertEqual([a["accountCode"] for a in response.data], ["4000"])

    def test_deactivate_account(self):
        response = self.client.patch(f"/api/accounts/{self.cash['id']}", {"isActive": False})

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.data["isActive"])
        self.assertEqual(self.client.delete(f"/api/accounts/{self.cash['id']}").status_code, 405)

    def test_update_missing_account_is_404(self):
        response = self.client.patch("/api/accounts/missing", {"accountName": "Ghost"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["detail"], "Account not found")

    def test_summary(self):
        response = self.client.get("/api/accounts/summary")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["accountCount"], 1)
        self.assertEqual(response.data["totals"]["Asset"], "0.00")


class PettyCashApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def payload(self, **overrides):
        data = {
            "date": "2024-03-04",
            "description": "Tea for harvest crew",
            "category": "Labour",
            "amount": "350.00",
            "type": "Expense",
        }
        data.update(overrides)
        return data

    def test_create_and_filter(self):
        self.client.post("/api/petty-cash", self.payload())
        self.client.post("/api/petty-cash", self.payload(type="Income", category="Misc"))

        response = self.client.get("/api/petty-cash", {"type": "Expense"})

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["amount"], "350.00")

    def test_negative_amount_is_rejected(self):
        response = self.client.post("/api/petty-cash", self.payload(amount="-1"))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get("/api/petty-cash").data, [])
