# permissions/roles.py

from __future__ import annotations

from typing import Optional

from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission


# =========================================================
# ROLE CONSTANTS (FARM STAFF)
# =========================================================
ROLE_ADMIN = "Admin"
ROLE_MANAGER = "Manager"
ROLE_SUPERVISOR = "Supervisor"
ROLE_OPERATOR = "Operator"
ROLE_VIEWER = "Viewer"

# Higher rank can do everything a lower rank can.
ROLE_RANKS: dict[str, int] = {
    ROLE_ADMIN: 5,
    ROLE_MANAGER: 4,
    ROLE_SUPERVISOR: 3,
    ROLE_OPERATOR: 2,
    ROLE_VIEWER: 1,
}

# Defaults used by StorageViewSet when a view does not override them.
DEFAULT_WRITE_ROLE = ROLE_OPERATOR
DEFAULT_DELETE_ROLE = ROLE_MANAGER


# =========================================================
# Helpers
# =========================================================
def role_rank(role: Optional[str]) -> int:
    """Unknown / missing roles rank 0."""
    return ROLE_RANKS.get(role or "", 0)


def has_role(user_role: Optional[str], required_role: Optional[str]) -> bool:
    return role_rank(user_role) >= role_rank(required_role)


def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


# =========================================================
# Minimum Role Permission
# =========================================================
class MinimumRole(BasePermission):
    """
    Role gate for write endpoints.

    Reads from the view:
    - write_role  : minimum role for POST / PUT / PATCH
    - delete_role : minimum role for DELETE

    Reads are always allowed. The whole check is skipped unless
    settings.FARM_ENFORCE_ROLES is on.
    """

    message = "Your role does not allow this action."

    def required_role_for(self, request, view) -> Optional[str]:
        if request.method in SAFE_METHODS:
            return None
        if request.method == "DELETE":
            return getattr(view, "delete_role", DEFAULT_DELETE_ROLE)
        return getattr(view, "write_role", DEFAULT_WRITE_ROLE)

    def has_permission(self, request, view):
        if not getattr(settings, "FARM_ENFORCE_ROLES", False):
            return True

        required = self.required_role_for(request, view)
        if required is None:
            return True

        user = request.user
        if not user or not user.is_authenticated:
            return False

        return has_role(get_user_role(user), required)
