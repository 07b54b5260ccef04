from decimal import Decimal

from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("category", models.CharField(max_length=50)),
                ("unit", models.CharField(max_length=20)),
                ("current_stock", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("reorder_level", models.DecimalField(decimal_places=2, max_digits=10)),
                ("location", models.CharField(blank=True, max_length=150, null=True)),
                ("unit_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("supplier", models.CharField(blank=True, max_length=150, null=True)),
                ("last_restocked", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "inventory_items",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="InventoryMovement",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("item_id", models.CharField(db_index=True, max_length=36)),
                ("movement_type", models.CharField(choices=[("IN", "Stock In"), ("OUT", "Stock Out"), ("ADJUSTMENT", "Adjustment")], max_length=10)),
                ("quantity", models.DecimalField(decimal_places=2, max_digits=10)),
                ("date", models.DateField()),
                ("reference", models.CharField(blank=True, max_length=150, null=True)),
                ("performed_by", models.CharField(blank=True, max_length=36, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "inventory_movements",
                "ordering": ["created_at"],
            },
        ),
    ]
