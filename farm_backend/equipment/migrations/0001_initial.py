from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Equipment",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("type", models.CharField(max_length=50)),
                ("registration_number", models.CharField(blank=True, max_length=50, null=True)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                ("purchase_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("status", models.CharField(choices=[("Operational", "Operational"), ("UnderMaintenance", "Under maintenance"), ("Broken", "Broken")], default="Operational", max_length=20)),
                ("last_service_date", models.DateField(blank=True, null=True)),
                ("next_service_date", models.DateField(blank=True, null=True)),
                ("location", models.CharField(blank=True, max_length=150, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "equipment",
                "ordering": ["created_at"],
                "verbose_name_plural": "Equipment",
            },
        ),
        migrations.CreateModel(
            name="MaintenanceRecord",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("equipment_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField()),
                ("maintenance_type", models.CharField(choices=[("Routine", "Routine"), ("Repair", "Repair"), ("Inspection", "Inspection")], max_length=12)),
                ("description", models.TextField()),
                ("cost", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("performed_by", models.CharField(blank=True, max_length=150, null=True)),
                ("next_service_due", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "maintenance_records",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="FuelLog",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("equipment_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField()),
                ("quantity", models.DecimalField(decimal_places=2, max_digits=10)),
                ("cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("mileage", models.PositiveIntegerField(blank=True, null=True)),
                ("operator_id", models.CharField(blank=True, max_length=36, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "fuel_logs",
                "ordering": ["created_at"],
            },
        ),
    ]
