# inventory/views/movement.py

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.exceptions import ValidationError

from inventory.serializers import InventoryMovementSerializer
from inventory.services.exceptions import StockOutOfRangeError
from inventory.services.stock import post_movement
from storage.api.viewsets import AppendOnlyViewSet


@extend_schema(
    tags=["inventory"],
    parameters=[
        OpenApiParameter(name="itemId", type=str, required=False),
        OpenApiParameter(name="movementType", type=str, required=False),
    ],
)
class InventoryMovementViewSet(AppendOnlyViewSet):
    """
    GET /api/inventory-movements?itemId=, POST /api/inventory-movements

    Append-only. POST mutates the referenced item's current stock.
    """

    resource = "inventory_movements"
    serializer_class = InventoryMovementSerializer
    list_filters = {"itemId": "item_id", "movementType": "movement_type"}

    def perform_create(self, data):
        try:
            return post_movement(storage=self.storage, movement=data)
        except StockOutOfRangeError as exc:
            raise ValidationError({"quantity": [str(exc)]}) from exc
