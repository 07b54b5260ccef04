# accounting/models/journal.py

"""
======================================================
PATH: accounting/models/journal.py
======================================================
JOURNAL ENTRY + JOURNAL LINE MODELS

A journal entry (header) owns 1..N lines. Posting a line adds
(debit - credit) to its account's balance.

Known gaps (kept as-is):
- lines are not required to balance (sum debits == sum credits)
- account_id is a plain id; a line may name an account that does not exist
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from storage.records import new_id


class JournalEntry(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    entry_date = models.DateField(db_index=True)
    description = models.TextField(help_text="Narrative description of the journal entry")
    reference = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Invoice number, receipt number, etc.",
    )
    created_by = models.CharField(max_length=36)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "journal_entries"
        ordering = ["created_at"]
        verbose_name_plural = "Journal entries"

    def __str__(self):
        return f"{self.entry_date} {self.description[:40]}"


class JournalLine(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    journal_entry_id = models.CharField(max_length=36, db_index=True)
    line_number = models.PositiveIntegerField(default=1)
    account_id = models.CharField(max_length=36, db_index=True)
    debit = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal("0.00"))
    credit = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal("0.00"))
    description = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "journal_lines"
        ordering = ["line_number"]

    def __str__(self):
        return f"{self.account_id} Dr {self.debit} Cr {self.credit}"
