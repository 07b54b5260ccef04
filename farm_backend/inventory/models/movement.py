# inventory/models/movement.py

"""
INVENTORY MOVEMENT LEDGER

Append-only. Inserting a movement mutates the referenced item's stock:
- IN          adds quantity
- OUT         subtracts quantity (stock may go negative)
- ADJUSTMENT  sets stock to quantity
"""

from django.db import models

from inventory.services.stock import MOVEMENT_ADJUSTMENT, MOVEMENT_IN, MOVEMENT_OUT
from storage.records import new_id


class InventoryMovement(models.Model):
    class MovementType(models.TextChoices):
        IN = MOVEMENT_IN, "Stock In"
        OUT = MOVEMENT_OUT, "Stock Out"
        ADJUSTMENT = MOVEMENT_ADJUSTMENT, "Adjustment"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    item_id = models.CharField(max_length=36, db_index=True)
    movement_type = models.CharField(max_length=10, choices=MovementType.choices)
    quantity = models.DecimalField(max_digits=10, decimal_places=2)
    date = models.DateField()
    reference = models.CharField(max_length=150, null=True, blank=True)  # plot id, PO number
    performed_by = models.CharField(max_length=36, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inventory_movements"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.movement_type} {self.quantity} -> {self.item_id}"
