from decimal import Decimal

from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("account_code", models.CharField(max_length=20, unique=True)),
                ("account_name", models.CharField(max_length=150)),
                ("account_type", models.CharField(choices=[("Asset", "Asset"), ("Liability", "Liability"), ("Equity", "Equity"), ("Revenue", "Revenue"), ("Expense", "Expense")], max_length=20)),
                ("parent_account_id", models.CharField(blank=True, max_length=36, null=True)),
                ("balance", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=15)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "accounts",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["account_type"], name="accounts_type_idx"),
                    models.Index(fields=["is_active"], name="accounts_active_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("account_code", ""), _negated=True), name="chk_account_code_not_blank"),
                ],
            },
        ),
        migrations.CreateModel(
            name="JournalEntry",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("entry_date", models.DateField(db_index=True)),
                ("description", models.TextField(help_text="Narrative description of the journal entry")),
                ("reference", models.CharField(blank=True, help_text="Invoice number, receipt number, etc.", max_length=100, null=True)),
                ("created_by", models.CharField(max_length=36)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "journal_entries",
                "ordering": ["created_at"],
                "verbose_name_plural": "Journal entries",
            },
        ),
        migrations.CreateModel(
            name="JournalLine",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("journal_entry_id", models.CharField(db_index=True, max_length=36)),
                ("line_number", models.PositiveIntegerField(default=1)),
                ("account_id", models.CharField(db_index=True, max_length=36)),
                ("debit", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=15)),
                ("credit", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=15)),
                ("description", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "journal_lines",
                "ordering": ["line_number"],
            },
        ),
        migrations.CreateModel(
            name="PettyCash",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("date", models.DateField()),
                ("description", models.TextField()),
                ("category", models.CharField(choices=[("Travel", "Travel"), ("Office", "Office"), ("Labour", "Labour"), ("Misc", "Misc")], max_length=10)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=10)),
                ("type", models.CharField(choices=[("Income", "Income"), ("Expense", "Expense")], max_length=10)),
                ("received_by", models.CharField(blank=True, max_length=150, null=True)),
                ("approved_by", models.CharField(blank=True, max_length=36, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "petty_cash",
                "ordering": ["created_at"],
                "verbose_name_plural": "Petty cash",
            },
        ),
    ]
