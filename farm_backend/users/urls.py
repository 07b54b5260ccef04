# users/urls.py

from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import AdminSettingViewSet, LoginView, UserViewSet

router = SimpleRouter(trailing_slash=False)
router.register("users", UserViewSet, basename="user")
router.register("admin-settings", AdminSettingViewSet, basename="admin-setting")

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("auth/login", LoginView.as_view(), name="login"),
    *router.urls,
]
