# cultivation/serializers.py

from decimal import Decimal

from rest_framework import serializers

from cultivation.models import DEFAULT_PLANT_DENSITY, CultivationCost, FertilizerSchedule, Plot
from storage.api.serializers import RecordSerializer


class PlotSerializer(RecordSerializer):
    name = serializers.CharField(max_length=150)
    location = serializers.CharField(max_length=200)
    area = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    variety = serializers.CharField(max_length=100)
    plantingDate = serializers.DateField(source="planting_date")
    plantDensity = serializers.IntegerField(
        source="plant_density", min_value=0, default=DEFAULT_PLANT_DENSITY
    )
    status = serializers.ChoiceField(choices=Plot.Status.choices, default=Plot.Status.ACTIVE)
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)


class PlotSummarySerializer(serializers.Serializer):
    plotId = serializers.CharField(source="plot_id")
    totalPlants = serializers.IntegerField(source="total_plants")
    totalCost = serializers.DecimalField(source="total_cost", max_digits=15, decimal_places=2)
    activityCount = serializers.IntegerField(source="activity_count")


class PlotActivitySerializer(RecordSerializer):
    plotId = serializers.CharField(source="plot_id", max_length=36)
    date = serializers.DateField()
    activityType = serializers.CharField(source="activity_type", max_length=50)
    description = serializers.CharField()
    cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, allow_null=True, default=None
    )
    performedBy = serializers.CharField(
        source="performed_by", max_length=36, allow_null=True, default=None
    )


class CultivationCostSerializer(RecordSerializer):
    plotId = serializers.CharField(source="plot_id", max_length=36)
    date = serializers.DateField()
    category = serializers.ChoiceField(choices=CultivationCost.Category.choices)
    description = serializers.CharField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)


class FertilizerScheduleSerializer(RecordSerializer):
    plotId = serializers.CharField(source="plot_id", max_length=36)
    fertilizerName = serializers.CharField(source="fertilizer_name", max_length=150)
    scheduledDate = serializers.DateField(source="scheduled_date")
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    unit = serializers.CharField(max_length=20)
    applicationMethod = serializers.CharField(
        source="application_method", max_length=50, allow_null=True, allow_blank=True, default=None
    )
    status = serializers.ChoiceField(
        choices=FertilizerSchedule.Status.choices, default=FertilizerSchedule.Status.SCHEDULED
    )
    appliedDate = serializers.DateField(source="applied_date", allow_null=True, default=None)
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)
