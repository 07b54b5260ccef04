# attendance/urls.py

from rest_framework.routers import SimpleRouter

from .views import (
    AttendanceViewSet,
    BiometricAttendanceViewSet,
    WageViewSet,
    WorkScheduleViewSet,
)

router = SimpleRouter(trailing_slash=False)
router.register("attendance", AttendanceViewSet, basename="attendance")
router.register("work-schedules", WorkScheduleViewSet, basename="work-schedule")
router.register(
    "biometric-attendance", BiometricAttendanceViewSet, basename="biometric-attendance"
)
router.register("wages", WageViewSet, basename="wage")

urlpatterns = router.urls
