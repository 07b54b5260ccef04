from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Animal",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("tag_number", models.CharField(max_length=50, unique=True)),
                ("name", models.CharField(blank=True, max_length=100, null=True)),
                ("type", models.CharField(max_length=50)),
                ("breed", models.CharField(blank=True, max_length=100, null=True)),
                ("date_of_birth", models.DateField(blank=True, null=True)),
                ("gender", models.CharField(choices=[("Male", "Male"), ("Female", "Female")], max_length=6)),
                ("status", models.CharField(choices=[("Active", "Active"), ("Sold", "Sold"), ("Deceased", "Deceased")], default="Active", max_length=10)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                ("purchase_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("current_value", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("location", models.CharField(blank=True, max_length=150, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "animals",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="MilkYield",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("animal_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField(db_index=True)),
                ("morning_yield", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("evening_yield", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("total_yield", models.DecimalField(decimal_places=2, max_digits=10)),
                ("quality", models.CharField(blank=True, choices=[("Good", "Good"), ("Average", "Average"), ("Poor", "Poor")], max_length=8, null=True)),
                ("recorded_by", models.CharField(blank=True, max_length=36, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "milk_yields",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="HealthRecord",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("animal_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField()),
                ("record_type", models.CharField(choices=[("Vaccination", "Vaccination"), ("Treatment", "Treatment"), ("Checkup", "Checkup")], max_length=12)),
                ("description", models.TextField()),
                ("veterinarian", models.CharField(blank=True, max_length=150, null=True)),
                ("cost", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("next_due_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "health_records",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="AnimalSale",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("animal_id", models.CharField(db_index=True, max_length=36)),
                ("sale_date", models.DateField()),
                ("sale_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("buyer_name", models.CharField(blank=True, max_length=150, null=True)),
                ("buyer_contact", models.CharField(blank=True, max_length=150, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "animal_sales",
                "ordering": ["created_at"],
            },
        ),
    ]
