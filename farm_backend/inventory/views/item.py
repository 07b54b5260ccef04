# inventory/views/item.py

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from inventory.serializers import InventoryItemSerializer
from inventory.services.stock import low_stock_items
from storage.api.viewsets import StorageViewSet


@extend_schema(
    tags=["inventory"],
    parameters=[OpenApiParameter(name="category", type=str, required=False)],
)
class InventoryItemViewSet(StorageViewSet):
    """
    GET/POST /api/inventory, GET/PATCH/DELETE /api/inventory/<id>

    Items carry a derived stockStatus (critical / low / adequate).
    """

    resource = "inventory_items"
    serializer_class = InventoryItemSerializer
    list_filters = {"category": "category"}

    @extend_schema(responses={200: InventoryItemSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="alerts")
    def alerts(self, request):
        """Items at or below their reorder level."""
        items = low_stock_items(storage=self.storage)
        return Response(self.get_serializer(items, many=True).data)
