# livestock/views.py
"""
LIVESTOCK

- GET/POST /api/animals, GET/PATCH/DELETE /api/animals/<id>
- GET /api/milk-yields?animalId=&startDate=&endDate=, POST
- GET /api/health-records?animalId=, POST
- GET/POST /api/animal-sales
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema

from storage.api.viewsets import AppendOnlyViewSet, StorageViewSet

from .serializers import (
    AnimalSaleSerializer,
    AnimalSerializer,
    HealthRecordSerializer,
    MilkYieldSerializer,
)

ANIMAL_PARAM = OpenApiParameter(name="animalId", type=str, required=False)


@extend_schema(tags=["livestock"])
class AnimalViewSet(StorageViewSet):
    resource = "animals"
    serializer_class = AnimalSerializer
    list_filters = {"status": "status", "type": "type"}


@extend_schema(
    tags=["livestock"],
    parameters=[
        ANIMAL_PARAM,
        OpenApiParameter(name="startDate", type=str, required=False),
        OpenApiParameter(name="endDate", type=str, required=False),
    ],
)
class MilkYieldViewSet(AppendOnlyViewSet):
    resource = "milk_yields"
    serializer_class = MilkYieldSerializer
    list_filters = {"animalId": "animal_id"}
    date_range_field = "date"


@extend_schema(tags=["livestock"], parameters=[ANIMAL_PARAM])
class HealthRecordViewSet(AppendOnlyViewSet):
    resource = "health_records"
    serializer_class = HealthRecordSerializer
    list_filters = {"animalId": "animal_id"}


@extend_schema(tags=["livestock"], parameters=[ANIMAL_PARAM])
class AnimalSaleViewSet(AppendOnlyViewSet):
    resource = "animal_sales"
    serializer_class = AnimalSaleSerializer
    list_filters = {"animalId": "animal_id"}
