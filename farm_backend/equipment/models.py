# equipment/models.py

from django.db import models

from storage.records import new_id


class Equipment(models.Model):
    class Status(models.TextChoices):
        OPERATIONAL = "Operational", "Operational"
        UNDER_MAINTENANCE = "UnderMaintenance", "Under maintenance"
        BROKEN = "Broken", "Broken"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    name = models.CharField(max_length=150)
    type = models.CharField(max_length=50)  # Tractor, Sprayer, Pump, Vehicle, Tool
    registration_number = models.CharField(max_length=50, null=True, blank=True)
    purchase_date = models.DateField(null=True, blank=True)
    purchase_cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPERATIONAL)
    last_service_date = models.DateField(null=True, blank=True)
    next_service_date = models.DateField(null=True, blank=True)
    location = models.CharField(max_length=150, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "equipment"
        ordering = ["created_at"]
        verbose_name_plural = "Equipment"

    def __str__(self):
        return f"{self.name} ({self.type})"


class MaintenanceRecord(models.Model):
    class MaintenanceType(models.TextChoices):
        ROUTINE = "Routine", "Routine"
        REPAIR = "Repair", "Repair"
        INSPECTION = "Inspection", "Inspection"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    equipment_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField()
    maintenance_type = models.CharField(max_length=12, choices=MaintenanceType.choices)
    description = models.TextField()
    cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    performed_by = models.CharField(max_length=150, null=True, blank=True)
    next_service_due = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "maintenance_records"
        ordering = ["created_at"]


class FuelLog(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    equipment_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField()
    quantity = models.DecimalField(max_digits=10, decimal_places=2)  # liters
    cost = models.DecimalField(max_digits=10, decimal_places=2)
    mileage = models.PositiveIntegerField(null=True, blank=True)
    operator_id = models.CharField(max_length=36, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "fuel_logs"
        ordering = ["created_at"]
