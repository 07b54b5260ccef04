# dashboard/views.py
"""
DASHBOARD

GET /api/dashboard/stats
-> {totalPlots, totalEmployees, totalAnimals, inventoryAlerts}

inventoryAlerts counts items at or below their reorder level.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from storage import get_storage


class DashboardStatsSerializer(serializers.Serializer):
    totalPlots = serializers.IntegerField(source="total_plots")
    totalEmployees = serializers.IntegerField(source="total_employees")
    totalAnimals = serializers.IntegerField(source="total_animals")
    inventoryAlerts = serializers.IntegerField(source="inventory_alerts")


class DashboardStatsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["dashboard"], responses={200: DashboardStatsSerializer})
    def get(self, request):
        stats = get_storage().dashboard_stats()
        return Response(DashboardStatsSerializer(stats).data)
