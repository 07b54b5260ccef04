from decimal import Decimal

from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AttendanceRecord",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("user_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField(db_index=True)),
                ("check_in", models.TimeField(blank=True, null=True)),
                ("check_out", models.TimeField(blank=True, null=True)),
                ("status", models.CharField(choices=[("Present", "Present"), ("Absent", "Absent"), ("Late", "Late"), ("HalfDay", "Half day")], max_length=10)),
                ("work_hours", models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("biometric_data", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "attendance_records",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="WorkSchedule",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("user_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField(db_index=True)),
                ("task_description", models.TextField()),
                ("plot_id", models.CharField(blank=True, max_length=36, null=True)),
                ("start_time", models.TimeField(blank=True, null=True)),
                ("end_time", models.TimeField(blank=True, null=True)),
                ("status", models.CharField(choices=[("Pending", "Pending"), ("InProgress", "In progress"), ("Completed", "Completed")], default="Pending", max_length=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "work_schedules",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="BiometricAttendance",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("attendance_id", models.CharField(db_index=True, max_length=36)),
                ("photo_url", models.TextField(blank=True, null=True)),
                ("fingerprint_data", models.TextField(blank=True, null=True)),
                ("capture_method", models.CharField(choices=[("Photo", "Photo"), ("Fingerprint", "Fingerprint"), ("Both", "Both")], max_length=12)),
                ("confidence", models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "biometric_attendance",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="Wage",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("user_id", models.CharField(db_index=True, max_length=36)),
                ("month", models.CharField(max_length=7)),
                ("basic_wage", models.DecimalField(decimal_places=2, max_digits=10)),
                ("overtime", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("deductions", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("bonus", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("total_paid", models.DecimalField(decimal_places=2, max_digits=10)),
                ("payment_date", models.DateField(blank=True, null=True)),
                ("payment_method", models.CharField(blank=True, choices=[("Cash", "Cash"), ("Bank Transfer", "Bank Transfer"), ("UPI", "UPI"), ("Cheque", "Cheque")], max_length=20, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "wages",
                "ordering": ["created_at"],
            },
        ),
    ]
