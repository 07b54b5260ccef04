# inventory/models/item.py

from decimal import Decimal

from django.db import models

from storage.records import new_id


class InventoryItem(models.Model):
    """
    A stocked farm input (fertilizer, pesticide, seeds, tools, fuel).

    current_stock is service-managed: it changes only when a movement is
    posted or an item is explicitly edited. Stock status is derived at read
    time and never stored.
    """

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    name = models.CharField(max_length=150)
    category = models.CharField(max_length=50)  # Fertilizer, Pesticide, Seeds, Tools, Fuel
    unit = models.CharField(max_length=20)  # kg, liters, pieces, bags
    current_stock = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    reorder_level = models.DecimalField(max_digits=10, decimal_places=2)
    location = models.CharField(max_length=150, null=True, blank=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    supplier = models.CharField(max_length=150, null=True, blank=True)
    last_restocked = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inventory_items"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.name} ({self.current_stock} {self.unit})"
