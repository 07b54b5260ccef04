# attendance/serializers.py

from decimal import Decimal

from rest_framework import serializers

from attendance.models import AttendanceRecord, BiometricAttendance, Wage, WorkSchedule
from storage.api.serializers import RecordSerializer


class AttendanceSerializer(RecordSerializer):
    userId = serializers.CharField(source="user_id", max_length=36)
    date = serializers.DateField()
    checkIn = serializers.TimeField(source="check_in", allow_null=True, default=None)
    checkOut = serializers.TimeField(source="check_out", allow_null=True, default=None)
    status = serializers.ChoiceField(choices=AttendanceRecord.Status.choices)
    workHours = serializers.DecimalField(
        source="work_hours",
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        allow_null=True,
        default=None,
    )
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)
    biometricData = serializers.CharField(
        source="biometric_data", allow_null=True, allow_blank=True, default=None
    )


class WorkScheduleSerializer(RecordSerializer):
    userId = serializers.CharField(source="user_id", max_length=36)
    date = serializers.DateField()
    taskDescription = serializers.CharField(source="task_description")
    plotId = serializers.CharField(source="plot_id", max_length=36, allow_null=True, default=None)
    startTime = serializers.TimeField(source="start_time", allow_null=True, default=None)
    endTime = serializers.TimeField(source="end_time", allow_null=True, default=None)
    status = serializers.ChoiceField(
        choices=WorkSchedule.Status.choices, default=WorkSchedule.Status.PENDING
    )


class BiometricAttendanceSerializer(RecordSerializer):
    attendanceId = serializers.CharField(source="attendance_id", max_length=36)
    photoUrl = serializers.CharField(source="photo_url", allow_null=True, allow_blank=True, default=None)
    fingerprintData = serializers.CharField(
        source="fingerprint_data", allow_null=True, allow_blank=True, default=None
    )
    captureMethod = serializers.ChoiceField(
        source="capture_method", choices=BiometricAttendance.CaptureMethod.choices
    )
    confidence = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        allow_null=True,
        default=None,
    )


class WageSerializer(RecordSerializer):
    userId = serializers.CharField(source="user_id", max_length=36)
    month = serializers.RegexField(
        r"^\d{4}-(0[1-9]|1[0-2])$",
        max_length=7,
        error_messages={"invalid": "Month must be in YYYY-MM format."},
    )
    basicWage = serializers.DecimalField(source="basic_wage", max_digits=10, decimal_places=2)
    overtime = serializers.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    deductions = serializers.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    bonus = serializers.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    totalPaid = serializers.DecimalField(source="total_paid", max_digits=10, decimal_places=2)
    paymentDate = serializers.DateField(source="payment_date", allow_null=True, default=None)
    paymentMethod = serializers.ChoiceField(
        source="payment_method",
        choices=Wage.PaymentMethod.choices,
        allow_null=True,
        default=None,
    )
    notes = serializers.CharField(allow_null=True, allow_blank=True, default=None)
