# audit/views.py
"""
AUDIT LOGS

- GET /api/audit-logs?userId=&module=
- POST /api/audit-logs   (explicit entries, e.g. LOGIN / LOGOUT from the UI)

Rows are never updated or deleted.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema

from storage.api.viewsets import CreateRecordMixin, ListRecordsMixin, StorageGenericViewSet

from .serializers import AuditLogSerializer


@extend_schema(
    tags=["audit"],
    parameters=[
        OpenApiParameter(name="userId", type=str, required=False),
        OpenApiParameter(name="module", type=str, required=False),
    ],
)
class AuditLogViewSet(ListRecordsMixin, CreateRecordMixin, StorageGenericViewSet):
    resource = "audit_logs"
    serializer_class = AuditLogSerializer
    list_filters = {"userId": "user_id", "module": "module"}
