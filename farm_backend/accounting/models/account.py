# accounting/models/account.py

from __future__ import annotations

from decimal import Decimal

from django.db import models
from django.db.models import Q

from storage.records import new_id


class Account(models.Model):
    """
    A single account in the farm chart of accounts.

    Guarantees:
    - Account codes are unique
    - balance starts at zero and is only moved by journal lines:
      balance == sum of every applied (debit - credit) delta
    - The sign is mechanical; a revenue account credited 35000 shows -35000
    """

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"

    ACCOUNT_TYPES = [
        (ASSET, "Asset"),
        (LIABILITY, "Liability"),
        (EQUITY, "Equity"),
        (REVENUE, "Revenue"),
        (EXPENSE, "Expense"),
    ]

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    account_code = models.CharField(max_length=20, unique=True)
    account_name = models.CharField(max_length=150)
    account_type = models.CharField(max_length=20, choices=ACCOUNT_TYPES)
    parent_account_id = models.CharField(max_length=36, null=True, blank=True)
    balance = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal("0.00"))
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "accounts"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["account_type"], name="accounts_type_idx"),
            models.Index(fields=["is_active"], name="accounts_active_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(account_code=""),
                name="chk_account_code_not_blank",
            ),
        ]

    def __str__(self):
        return f"{self.account_code} – {self.account_name}"
