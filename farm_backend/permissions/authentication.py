# permissions/authentication.py
"""
PATH: permissions/authentication.py

HEADER AUTHENTICATION

The browser UI keeps the logged-in user client side and sends its id on
every request as `X-User-Id`. We resolve that id through storage.

- no header / unknown id / inactive user -> anonymous (None)
- known active user                      -> FarmPrincipal
"""

from __future__ import annotations

from rest_framework.authentication import BaseAuthentication

from storage import get_storage

USER_ID_HEADER = "HTTP_X_USER_ID"


class FarmPrincipal:
    """Authenticated request user built from a storage user record."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, record: dict):
        self.record = record
        self.id = record["id"]
        self.pk = record["id"]
        self.username = record.get("username")
        self.role = record.get("role")

    def __str__(self):
        return self.username or self.id


class HeaderUserAuthentication(BaseAuthentication):
    def authenticate(self, request):
        user_id = (request.META.get(USER_ID_HEADER) or "").strip()
        if not user_id:
            return None

        record = get_storage().get("users", user_id)
        if record is None or not record.get("is_active", True):
            return None

        return (FarmPrincipal(record), None)

    def authenticate_header(self, request):
        return "X-User-Id"
