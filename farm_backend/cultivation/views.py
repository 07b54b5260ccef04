# cultivation/views.py
"""
CULTIVATION

- GET/POST /api/plots, GET/PATCH/DELETE /api/plots/<id>
- GET /api/plots/<id>/summary       (plants, cost, activity count)
- GET /api/plot-activities?plotId=  (plotId required), POST
- GET /api/cultivation-costs?plotId= (plotId required), POST
- GET /api/fertilizer-schedules?plotId=, POST, PATCH <id>
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from storage.api.viewsets import AppendOnlyViewSet, MutableRecordViewSet, StorageViewSet

from .serializers import (
    CultivationCostSerializer,
    FertilizerScheduleSerializer,
    PlotActivitySerializer,
    PlotSerializer,
    PlotSummarySerializer,
)
from .services import plot_summary

PLOT_PARAM = OpenApiParameter(name="plotId", type=str, required=False)


@extend_schema(tags=["cultivation"])
class PlotViewSet(StorageViewSet):
    resource = "plots"
    serializer_class = PlotSerializer
    list_filters = {"status": "status"}

    @extend_schema(responses={200: PlotSummarySerializer})
    @action(detail=True, methods=["get"], url_path="summary")
    def summary(self, request, pk=None):
        plot = self.get_record()
        return Response(
            PlotSummarySerializer(plot_summary(storage=self.storage, plot=plot)).data
        )


@extend_schema(tags=["cultivation"], parameters=[PLOT_PARAM])
class PlotActivityViewSet(AppendOnlyViewSet):
    resource = "plot_activities"
    serializer_class = PlotActivitySerializer
    list_filters = {"plotId": "plot_id"}
    required_filters = ("plotId",)


@extend_schema(tags=["cultivation"], parameters=[PLOT_PARAM])
class CultivationCostViewSet(AppendOnlyViewSet):
    resource = "cultivation_costs"
    serializer_class = CultivationCostSerializer
    list_filters = {"plotId": "plot_id", "category": "category"}
    required_filters = ("plotId",)


@extend_schema(tags=["cultivation"], parameters=[PLOT_PARAM])
class FertilizerScheduleViewSet(MutableRecordViewSet):
    resource = "fertilizer_schedules"
    serializer_class = FertilizerScheduleSerializer
    list_filters = {"plotId": "plot_id", "status": "status"}
