# equipment/views.py
"""
EQUIPMENT & VEHICLE MAINTENANCE

- GET/POST /api/equipment, GET/PATCH/DELETE /api/equipment/<id>
- GET /api/maintenance-records?equipmentId=, POST
- GET /api/fuel-logs?equipmentId=, POST
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema

from storage.api.viewsets import AppendOnlyViewSet, StorageViewSet

from .serializers import EquipmentSerializer, FuelLogSerializer, MaintenanceRecordSerializer

EQUIPMENT_PARAM = OpenApiParameter(name="equipmentId", type=str, required=False)


@extend_schema(tags=["equipment"])
class EquipmentViewSet(StorageViewSet):
    resource = "equipment"
    serializer_class = EquipmentSerializer
    list_filters = {"status": "status", "type": "type"}


@extend_schema(tags=["equipment"], parameters=[EQUIPMENT_PARAM])
class MaintenanceRecordViewSet(AppendOnlyViewSet):
    resource = "maintenance_records"
    serializer_class = MaintenanceRecordSerializer
    list_filters = {"equipmentId": "equipment_id"}


@extend_schema(tags=["equipment"], parameters=[EQUIPMENT_PARAM])
class FuelLogViewSet(AppendOnlyViewSet):
    resource = "fuel_logs"
    serializer_class = FuelLogSerializer
    list_filters = {"equipmentId": "equipment_id"}
