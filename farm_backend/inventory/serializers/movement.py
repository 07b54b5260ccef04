# inventory/serializers/movement.py

from decimal import Decimal

from rest_framework import serializers

from inventory.models import InventoryMovement
from storage.api.serializers import RecordSerializer


class InventoryMovementSerializer(RecordSerializer):
    itemId = serializers.CharField(source="item_id", max_length=36)
    movementType = serializers.ChoiceField(
        source="movement_type",
        choices=InventoryMovement.MovementType.choices,
    )
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    date = serializers.DateField()
    reference = serializers.CharField(max_length=150, allow_null=True, allow_blank=True, default=None)
    performedBy = serializers.CharField(
        source="performed_by", max_length=36, allow_null=True, default=None
    )
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)
