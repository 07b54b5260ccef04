# users/views.py
"""
USERS, LOGIN & ADMIN SETTINGS

- POST /api/auth/login           -> user record (no password) or 401
- GET/POST /api/users            (writes need Admin when roles are enforced)
- GET /api/admin-settings?category=
- GET/PATCH /api/admin-settings/<key>   PATCH body: {"value": ...}
- POST /api/admin-settings

Login is throttled separately from the rest of the API.
"""

from __future__ import annotations

import logging

from django.contrib.auth.hashers import make_password
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from permissions.roles import ROLE_ADMIN
from storage import get_storage
from storage.api.viewsets import MutableRecordViewSet

from .serializers import (
    AdminSettingSerializer,
    AdminSettingValueSerializer,
    LoginSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


# ---------------- THROTTLES (TARGETED) ----------------
class LoginAnonThrottle(AnonRateThrottle):
    """
    Anonymous login throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['anon'].
    """
    scope = "anon"


# ---------------- LOGIN ----------------
@extend_schema(tags=["auth"], responses={200: UserSerializer})
class LoginView(generics.GenericAPIView):
    serializer_class = LoginSerializer
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [LoginAnonThrottle]

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        username = serializer.validated_data["username"]
        user = get_storage().verify_credentials(
            username,
            serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login for username=%s", username)
            return Response(
                {"detail": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        logger.info("User %s logged in", username)
        return Response(UserSerializer(user).data)


# ---------------- USERS ----------------
@extend_schema(tags=["users"])
class UserViewSet(MutableRecordViewSet):
    resource = "users"
    serializer_class = UserSerializer
    list_filters = {"role": "role"}
    write_role = ROLE_ADMIN

    def perform_create(self, data):
        return self.storage.create_user(data)

    def perform_update(self, record, changes):
        if "password" in changes:
            changes["password"] = make_password(changes["password"])
        return super().perform_update(record, changes)


# ---------------- ADMIN SETTINGS ----------------
@extend_schema(tags=["admin-settings"])
class AdminSettingViewSet(MutableRecordViewSet):
    resource = "admin_settings"
    serializer_class = AdminSettingSerializer
    list_filters = {"category": "category"}
    lookup_field = "key"
    write_role = ROLE_ADMIN

    def get_serializer_class(self):
        if self.action == "partial_update":
            return AdminSettingValueSerializer
        return AdminSettingSerializer

    def lookup_record(self, lookup_value):
        return self.storage.find(self.resource, setting_key=lookup_value)

    @extend_schema(request=AdminSettingValueSerializer, responses={200: AdminSettingSerializer})
    def partial_update(self, request, *args, **kwargs):
        record = self.get_record()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated = self.perform_update(
            record, {"setting_value": serializer.validated_data["value"]}
        )
        return Response(AdminSettingSerializer(updated).data)
