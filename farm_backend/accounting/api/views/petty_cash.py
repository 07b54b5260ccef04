# accounting/api/views/petty_cash.py

from drf_spectacular.utils import OpenApiParameter, extend_schema

from accounting.api.serializers import PettyCashSerializer
from storage.api.viewsets import AppendOnlyViewSet


@extend_schema(
    tags=["accounting"],
    parameters=[
        OpenApiParameter(name="type", type=str, required=False),
        OpenApiParameter(name="category", type=str, required=False),
    ],
)
class PettyCashViewSet(AppendOnlyViewSet):
    """GET/POST /api/petty-cash (append-only, no ledger posting)."""

    resource = "petty_cash"
    serializer_class = PettyCashSerializer
    list_filters = {"type": "type", "category": "category"}
    date_range_field = "date"
