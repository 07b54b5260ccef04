# accounting/models/petty_cash.py

from django.db import models

from storage.records import new_id


class PettyCash(models.Model):
    """Small cash receipts and payments. Append-only, no ledger posting."""

    class Category(models.TextChoices):
        TRAVEL = "Travel", "Travel"
        OFFICE = "Office", "Office"
        LABOUR = "Labour", "Labour"
        MISC = "Misc", "Misc"

    class Type(models.TextChoices):
        INCOME = "Income", "Income"
        EXPENSE = "Expense", "Expense"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    date = models.DateField()
    description = models.TextField()
    category = models.CharField(max_length=10, choices=Category.choices)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    type = models.CharField(max_length=10, choices=Type.choices)
    received_by = models.CharField(max_length=150, null=True, blank=True)
    approved_by = models.CharField(max_length=36, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "petty_cash"
        ordering = ["created_at"]
        verbose_name_plural = "Petty cash"
