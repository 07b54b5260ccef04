# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/ and have no trailing slash, matching the
paths the browser UI calls (/api/plots, /api/journal-entries/<id>, ...).

Operational maturity:
- /api/health reports liveness plus the configured storage backend.
- /api/schema + /api/docs expose the OpenAPI document (drf-spectacular).
"""

from __future__ import annotations

from django.conf import settings
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from storage import get_storage


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Farm Management API is running",
            "docs": {
                "swagger": "/api/docs",
                "schema": "/api/schema",
            },
            "modules": {
                "auth": "/api/auth/login",
                "dashboard": "/api/dashboard/stats",
                "users": "/api/users",
                "attendance": "/api/attendance",
                "cultivation": "/api/plots",
                "inventory": "/api/inventory",
                "equipment": "/api/equipment",
                "livestock": "/api/animals",
                "finance": "/api/accounts",
                "audit": "/api/audit-logs",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "storage": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "storage": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms the storage backend answers a cheap read
    """
    backend_name = settings.FARM_STORAGE_BACKEND
    try:
        get_storage().list("users")
    except Exception as e:
        return Response(
            {"status": "degraded", "storage": backend_name, "error": str(e)},
            status=503,
        )
    return Response({"status": "ok", "storage": backend_name})


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema", SpectacularAPIView.as_view(), name="schema"),
    path("docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Farm modules
    path("", include("users.urls")),
    path("", include("dashboard.urls")),
    path("", include("attendance.urls")),
    path("", include("cultivation.urls")),
    path("", include("inventory.urls")),
    path("", include("equipment.urls")),
    path("", include("livestock.urls")),
    path("", include("accounting.api.urls")),
    path("", include("audit.urls")),
]

urlpatterns = [
    # Visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
