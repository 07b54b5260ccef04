# cultivation/models.py

from __future__ import annotations

from django.db import models

from storage.records import new_id

DEFAULT_PLANT_DENSITY = 1600  # plants per hectare


class Plot(models.Model):
    class Status(models.TextChoices):
        ACTIVE = "Active", "Active"
        HARVESTED = "Harvested", "Harvested"
        FALLOW = "Fallow", "Fallow"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    name = models.CharField(max_length=150)
    location = models.CharField(max_length=200)
    area = models.DecimalField(max_digits=10, decimal_places=2)  # hectares
    variety = models.CharField(max_length=100)
    planting_date = models.DateField()
    plant_density = models.PositiveIntegerField(default=DEFAULT_PLANT_DENSITY)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "plots"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.name} ({self.variety})"


class PlotActivity(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    plot_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField()
    activity_type = models.CharField(max_length=50)  # Fertigation, Irrigation, Weeding, ...
    description = models.TextField()
    cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    performed_by = models.CharField(max_length=36, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "plot_activities"
        ordering = ["created_at"]


class CultivationCost(models.Model):
    class Category(models.TextChoices):
        LABOUR = "Labour", "Labour"
        FERTILIZER = "Fertilizer", "Fertilizer"
        PEST_CONTROL = "PestControl", "Pest control"
        EQUIPMENT = "Equipment", "Equipment"
        OTHER = "Other", "Other"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    plot_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField()
    category = models.CharField(max_length=12, choices=Category.choices)
    description = models.TextField()
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cultivation_costs"
        ordering = ["created_at"]


class FertilizerSchedule(models.Model):
    class Status(models.TextChoices):
        SCHEDULED = "Scheduled", "Scheduled"
        APPLIED = "Applied", "Applied"
        CANCELLED = "Cancelled", "Cancelled"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    plot_id = models.CharField(max_length=36, db_index=True)
    fertilizer_name = models.CharField(max_length=150)
    scheduled_date = models.DateField()
    quantity = models.DecimalField(max_digits=10, decimal_places=2)
    unit = models.CharField(max_length=20)  # kg, liters, bags
    application_method = models.CharField(max_length=50, null=True, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.SCHEDULED)
    applied_date = models.DateField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "fertilizer_schedules"
        ordering = ["created_at"]
