# equipment/serializers.py

from decimal import Decimal

from rest_framework import serializers

from equipment.models import Equipment, MaintenanceRecord
from storage.api.serializers import RecordSerializer


class EquipmentSerializer(RecordSerializer):
    name = serializers.CharField(max_length=150)
    type = serializers.CharField(max_length=50)
    registrationNumber = serializers.CharField(
        source="registration_number", max_length=50, allow_null=True, allow_blank=True, default=None
    )
    purchaseDate = serializers.DateField(source="purchase_date", allow_null=True, default=None)
    purchaseCost = serializers.DecimalField(
        source="purchase_cost",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        allow_null=True,
        default=None,
    )
    status = serializers.ChoiceField(
        choices=Equipment.Status.choices, default=Equipment.Status.OPERATIONAL
    )
    lastServiceDate = serializers.DateField(source="last_service_date", allow_null=True, default=None)
    nextServiceDate = serializers.DateField(source="next_service_date", allow_null=True, default=None)
    location = serializers.CharField(max_length=150, allow_null=True, allow_blank=True, default=None)
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)


class MaintenanceRecordSerializer(RecordSerializer):
    equipmentId = serializers.CharField(source="equipment_id", max_length=36)
    date = serializers.DateField()
    maintenanceType = serializers.ChoiceField(
        source="maintenance_type", choices=MaintenanceRecord.MaintenanceType.choices
    )
    description = serializers.CharField()
    cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), allow_null=True, default=None
    )
    performedBy = serializers.CharField(
        source="performed_by", max_length=150, allow_null=True, allow_blank=True, default=None
    )
    nextServiceDue = serializers.DateField(source="next_service_due", allow_null=True, default=None)


class FuelLogSerializer(RecordSerializer):
    equipmentId = serializers.CharField(source="equipment_id", max_length=36)
    date = serializers.DateField()
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    mileage = serializers.IntegerField(min_value=0, allow_null=True, default=None)
    operator = serializers.CharField(source="operator_id", max_length=36, allow_null=True, default=None)
