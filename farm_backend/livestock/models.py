# livestock/models.py

from django.db import models

from storage.records import new_id


class Animal(models.Model):
    class Gender(models.TextChoices):
        MALE = "Male", "Male"
        FEMALE = "Female", "Female"

    class Status(models.TextChoices):
        ACTIVE = "Active", "Active"
        SOLD = "Sold", "Sold"
        DECEASED = "Deceased", "Deceased"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    tag_number = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=100, null=True, blank=True)
    type = models.CharField(max_length=50)  # Cow, Buffalo, Goat, Chicken, ...
    breed = models.CharField(max_length=100, null=True, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=6, choices=Gender.choices)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    purchase_date = models.DateField(null=True, blank=True)
    purchase_cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    current_value = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    location = models.CharField(max_length=150, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "animals"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.tag_number} ({self.type})"


class MilkYield(models.Model):
    class Quality(models.TextChoices):
        GOOD = "Good", "Good"
        AVERAGE = "Average", "Average"
        POOR = "Poor", "Poor"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    animal_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField(db_index=True)
    morning_yield = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    evening_yield = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    total_yield = models.DecimalField(max_digits=10, decimal_places=2)  # liters
    quality = models.CharField(max_length=8, choices=Quality.choices, null=True, blank=True)
    recorded_by = models.CharField(max_length=36, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "milk_yields"
        ordering = ["created_at"]


class HealthRecord(models.Model):
    class RecordType(models.TextChoices):
        VACCINATION = "Vaccination", "Vaccination"
        TREATMENT = "Treatment", "Treatment"
        CHECKUP = "Checkup", "Checkup"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    animal_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField()
    record_type = models.CharField(max_length=12, choices=RecordType.choices)
    description = models.TextField()
    veterinarian = models.CharField(max_length=150, null=True, blank=True)
    cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    next_due_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "health_records"
        ordering = ["created_at"]


class AnimalSale(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    animal_id = models.CharField(max_length=36, db_index=True)
    sale_date = models.DateField()
    sale_price = models.DecimalField(max_digits=10, decimal_places=2)
    buyer_name = models.CharField(max_length=150, null=True, blank=True)
    buyer_contact = models.CharField(max_length=150, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "animal_sales"
        ordering = ["created_at"]
