# inventory/serializers/item.py

from decimal import Decimal

from rest_framework import serializers

from inventory.services.stock import stock_status
from storage.api.serializers import RecordSerializer


class InventoryItemSerializer(RecordSerializer):
    """
    Inventory item with its derived stock status.

    stockStatus is computed on every read from currentStock / reorderLevel.
    """

    name = serializers.CharField(max_length=150)
    category = serializers.CharField(max_length=50)
    unit = serializers.CharField(max_length=20)
    currentStock = serializers.DecimalField(
        source="current_stock",
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    reorderLevel = serializers.DecimalField(
        source="reorder_level",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
    )
    location = serializers.CharField(max_length=150, allow_null=True, allow_blank=True, default=None)
    unitPrice = serializers.DecimalField(
        source="unit_price",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        allow_null=True,
        default=None,
    )
    supplier = serializers.CharField(max_length=150, allow_null=True, allow_blank=True, default=None)
    lastRestocked = serializers.DateField(source="last_restocked", allow_null=True, default=None)
    stockStatus = serializers.SerializerMethodField()

    def get_stockStatus(self, obj) -> str:
        return stock_status(obj.get("current_stock"), obj.get("reorder_level"))
