# attendance/models.py

from __future__ import annotations

from decimal import Decimal

from django.db import models

from storage.records import new_id


class AttendanceRecord(models.Model):
    """
    One attendance row per user per day.

    Nothing prevents duplicate rows for the same user/date, and a check-out
    may be recorded without a check-in.
    """

    class Status(models.TextChoices):
        PRESENT = "Present", "Present"
        ABSENT = "Absent", "Absent"
        LATE = "Late", "Late"
        HALF_DAY = "HalfDay", "Half day"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    user_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField(db_index=True)
    check_in = models.TimeField(null=True, blank=True)
    check_out = models.TimeField(null=True, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices)
    work_hours = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    biometric_data = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "attendance_records"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.user_id} {self.date} {self.status}"


class WorkSchedule(models.Model):
    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        IN_PROGRESS = "InProgress", "In progress"
        COMPLETED = "Completed", "Completed"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    user_id = models.CharField(max_length=36, db_index=True)
    date = models.DateField(db_index=True)
    task_description = models.TextField()
    plot_id = models.CharField(max_length=36, null=True, blank=True)
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)
    status = models.CharField(max_length=12, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "work_schedules"
        ordering = ["created_at"]


class BiometricAttendance(models.Model):
    """Simulated photo / fingerprint capture attached to an attendance row."""

    class CaptureMethod(models.TextChoices):
        PHOTO = "Photo", "Photo"
        FINGERPRINT = "Fingerprint", "Fingerprint"
        BOTH = "Both", "Both"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    attendance_id = models.CharField(max_length=36, db_index=True)
    photo_url = models.TextField(null=True, blank=True)
    fingerprint_data = models.TextField(null=True, blank=True)
    capture_method = models.CharField(max_length=12, choices=CaptureMethod.choices)
    confidence = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "biometric_attendance"
        ordering = ["created_at"]


class Wage(models.Model):
    class PaymentMethod(models.TextChoices):
        CASH = "Cash", "Cash"
        BANK_TRANSFER = "Bank Transfer", "Bank Transfer"
        UPI = "UPI", "UPI"
        CHEQUE = "Cheque", "Cheque"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    user_id = models.CharField(max_length=36, db_index=True)
    month = models.CharField(max_length=7)  # YYYY-MM
    basic_wage = models.DecimalField(max_digits=10, decimal_places=2)
    overtime = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    deductions = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    bonus = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    total_paid = models.DecimalField(max_digits=10, decimal_places=2)
    payment_date = models.DateField(null=True, blank=True)
    payment_method = models.CharField(
        max_length=20, choices=PaymentMethod.choices, null=True, blank=True
    )
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "wages"
        ordering = ["created_at"]
