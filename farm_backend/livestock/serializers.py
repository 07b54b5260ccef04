# livestock/serializers.py

from decimal import Decimal

from rest_framework import serializers

from livestock.models import Animal, HealthRecord, MilkYield
from storage.api.serializers import RecordSerializer, UniqueInStorage

MONEY = {"max_digits": 10, "decimal_places": 2, "min_value": Decimal("0")}


class AnimalSerializer(RecordSerializer):
    tagNumber = serializers.CharField(
        source="tag_number",
        max_length=50,
        validators=[UniqueInStorage("animals", "tag_number", "Tag number already in use")],
    )
    name = serializers.CharField(max_length=100, allow_null=True, allow_blank=True, default=None)
    type = serializers.CharField(max_length=50)
    breed = serializers.CharField(max_length=100, allow_null=True, allow_blank=True, default=None)
    dateOfBirth = serializers.DateField(source="date_of_birth", allow_null=True, default=None)
    gender = serializers.ChoiceField(choices=Animal.Gender.choices)
    status = serializers.ChoiceField(choices=Animal.Status.choices, default=Animal.Status.ACTIVE)
    purchaseDate = serializers.DateField(source="purchase_date", allow_null=True, default=None)
    purchaseCost = serializers.DecimalField(
        source="purchase_cost", allow_null=True, default=None, **MONEY
    )
    currentValue = serializers.DecimalField(
        source="current_value", allow_null=True, default=None, **MONEY
    )
    location = serializers.CharField(max_length=150, allow_null=True, allow_blank=True, default=None)
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)


class MilkYieldSerializer(RecordSerializer):
    """
    Daily milk yield.

    totalYield may be omitted when both session yields are given; it is then
    morningYield + eveningYield.
    """

    animalId = serializers.CharField(source="animal_id", max_length=36)
    date = serializers.DateField()
    morningYield = serializers.DecimalField(
        source="morning_yield", allow_null=True, default=None, **MONEY
    )
    eveningYield = serializers.DecimalField(
        source="evening_yield", allow_null=True, default=None, **MONEY
    )
    totalYield = serializers.DecimalField(source="total_yield", required=False, **MONEY)
    quality = serializers.ChoiceField(
        choices=MilkYield.Quality.choices, allow_null=True, default=None
    )
    recordedBy = serializers.CharField(
        source="recorded_by", max_length=36, allow_null=True, default=None
    )

    def validate(self, attrs):
        if attrs.get("total_yield") is None:
            morning = attrs.get("morning_yield")
            evening = attrs.get("evening_yield")
            if morning is None or evening is None:
                raise serializers.ValidationError(
                    {"totalYield": ["This field is required."]}
                )
            attrs["total_yield"] = morning + evening
        return attrs


class HealthRecordSerializer(RecordSerializer):
    animalId = serializers.CharField(source="animal_id", max_length=36)
    date = serializers.DateField()
    recordType = serializers.ChoiceField(
        source="record_type", choices=HealthRecord.RecordType.choices
    )
    description = serializers.CharField()
    veterinarian = serializers.CharField(
        max_length=150, allow_null=True, allow_blank=True, default=None
    )
    cost = serializers.DecimalField(allow_null=True, default=None, **MONEY)
    nextDueDate = serializers.DateField(source="next_due_date", allow_null=True, default=None)


class AnimalSaleSerializer(RecordSerializer):
    animalId = serializers.CharField(source="animal_id", max_length=36)
    saleDate = serializers.DateField(source="sale_date")
    salePrice = serializers.DecimalField(source="sale_price", **MONEY)
    buyerName = serializers.CharField(
        source="buyer_name", max_length=150, allow_null=True, allow_blank=True, default=None
    )
    buyerContact = serializers.CharField(
        source="buyer_contact", max_length=150, allow_null=True, allow_blank=True, default=None
    )
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)
