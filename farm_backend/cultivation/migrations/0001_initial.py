from django.db import migrations, models

import storage.records


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Plot",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("location", models.CharField(max_length=200)),
                ("area", models.DecimalField(decimal_places=2, max_digits=10)),
                ("variety", models.CharField(max_length=100)),
                ("planting_date", models.DateField()),
                ("plant_density", models.PositiveIntegerField(default=1600)),
                ("status", models.CharField(choices=[("Active", "Active"), ("Harvested", "Harvested"), ("Fallow", "Fallow")], default="Active", max_length=10)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "plots",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="PlotActivity",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("plot_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField()),
                ("activity_type", models.CharField(max_length=50)),
                ("description", models.TextField()),
                ("cost", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("performed_by", models.CharField(blank=True, max_length=36, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "plot_activities",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="CultivationCost",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("plot_id", models.CharField(db_index=True, max_length=36)),
                ("date", models.DateField()),
                ("category", models.CharField(choices=[("Labour", "Labour"), ("Fertilizer", "Fertilizer"), ("PestControl", "Pest control"), ("Equipment", "Equipment"), ("Other", "Other")], max_length=12)),
                ("description", models.TextField()),
                ("amount", models.DecimalField(decimal_places=2, max_digits=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "cultivation_costs",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="FertilizerSchedule",
            fields=[
                ("id", models.CharField(default=storage.records.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ("plot_id", models.CharField(db_index=True, max_length=36)),
                ("fertilizer_name", models.CharField(max_length=150)),
                ("scheduled_date", models.DateField()),
                ("quantity", models.DecimalField(decimal_places=2, max_digits=10)),
                ("unit", models.CharField(max_length=20)),
                ("application_method", models.CharField(blank=True, max_length=50, null=True)),
                ("status", models.CharField(choices=[("Scheduled", "Scheduled"), ("Applied", "Applied"), ("Cancelled", "Cancelled")], default="Scheduled", max_length=10)),
                ("applied_date", models.DateField(blank=True, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "fertilizer_schedules",
                "ordering": ["created_at"],
            },
        ),
    ]
