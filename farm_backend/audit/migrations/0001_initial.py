from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("user_id", models.CharField(db_index=True, max_length=36)),
                ("action", models.CharField(max_length=20)),
                ("module", models.CharField(db_index=True, max_length=50)),
                ("entity_type", models.CharField(blank=True, max_length=50, null=True)),
                ("entity_id", models.CharField(blank=True, max_length=36, null=True)),
                ("changes", models.JSONField(blank=True, null=True)),
                ("ip_address", models.CharField(blank=True, max_length=45, null=True)),
                ("timestamp", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "audit_logs",
                "ordering": ["timestamp"],
            },
        ),
    ]
