# attendance/views.py
"""
ATTENDANCE & WORK MANAGEMENT

- GET /api/attendance?date=YYYY-MM-DD
- GET /api/attendance?userId=<id>&startDate=&endDate=
  (400 when neither date nor userId is given)
- GET /api/work-schedules?date= | ?userId=   (same rule)
- GET /api/biometric-attendance/<attendanceId>
- GET /api/wages?userId=&month=
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema

from storage.api.viewsets import (
    CreateRecordMixin,
    MutableRecordViewSet,
    RetrieveRecordMixin,
    StorageGenericViewSet,
)

from .serializers import (
    AttendanceSerializer,
    BiometricAttendanceSerializer,
    WageSerializer,
    WorkScheduleSerializer,
)

DATE_PARAM = OpenApiParameter(name="date", type=str, required=False, description="YYYY-MM-DD")
USER_PARAM = OpenApiParameter(name="userId", type=str, required=False)


@extend_schema(
    tags=["attendance"],
    parameters=[
        DATE_PARAM,
        USER_PARAM,
        OpenApiParameter(name="startDate", type=str, required=False),
        OpenApiParameter(name="endDate", type=str, required=False),
    ],
)
class AttendanceViewSet(MutableRecordViewSet):
    resource = "attendance"
    serializer_class = AttendanceSerializer
    list_filters = {"date": "date", "userId": "user_id"}
    date_params = frozenset({"date"})
    required_filters = ("date", "userId")
    date_range_field = "date"


@extend_schema(tags=["attendance"], parameters=[DATE_PARAM, USER_PARAM])
class WorkScheduleViewSet(MutableRecordViewSet):
    resource = "work_schedules"
    serializer_class = WorkScheduleSerializer
    list_filters = {"date": "date", "userId": "user_id"}
    date_params = frozenset({"date"})
    required_filters = ("date", "userId")


@extend_schema(tags=["attendance"])
class BiometricAttendanceViewSet(
    RetrieveRecordMixin,
    CreateRecordMixin,
    StorageGenericViewSet,
):
    """Biometric captures are looked up by the attendance row they belong to."""

    resource = "biometric_attendance"
    serializer_class = BiometricAttendanceSerializer
    lookup_field = "attendance_id"

    def lookup_record(self, lookup_value):
        return self.storage.find(self.resource, attendance_id=lookup_value)


@extend_schema(
    tags=["wages"],
    parameters=[USER_PARAM, OpenApiParameter(name="month", type=str, required=False)],
)
class WageViewSet(MutableRecordViewSet):
    resource = "wages"
    serializer_class = WageSerializer
    list_filters = {"userId": "user_id", "month": "month"}
