from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150, unique=True)),
                ("password", models.CharField(max_length=255)),
                ("full_name", models.CharField(max_length=200)),
                ("role", models.CharField(choices=[("Admin", "Admin"), ("Manager", "Manager"), ("Supervisor", "Supervisor"), ("Operator", "Operator"), ("Viewer", "Viewer")], max_length=20)),
                ("email", models.CharField(blank=True, max_length=254, null=True)),
                ("phone", models.CharField(blank=True, max_length=50, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="AdminSetting",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("setting_key", models.CharField(max_length=100, unique=True)),
                ("setting_value", models.JSONField()),
                ("category", models.CharField(choices=[("Attendance", "Attendance"), ("Wages", "Wages"), ("General", "General"), ("Notifications", "Notifications")], max_length=20)),
                ("description", models.TextField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "admin_settings",
                "ordering": ["updated_at"],
            },
        ),
    ]
