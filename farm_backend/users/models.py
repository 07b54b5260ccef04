# users/models.py

from __future__ import annotations

from django.db import models

from storage.records import new_id


class User(models.Model):
    """
    Farm staff account.

    Not Django's auth user: the UI authenticates against this table and
    sends the id back as X-User-Id. Password is always stored hashed.
    """

    class Role(models.TextChoices):
        ADMIN = "Admin", "Admin"
        MANAGER = "Manager", "Manager"
        SUPERVISOR = "Supervisor", "Supervisor"
        OPERATOR = "Operator", "Operator"
        VIEWER = "Viewer", "Viewer"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=255)
    full_name = models.CharField(max_length=200)
    role = models.CharField(max_length=20, choices=Role.choices)
    email = models.CharField(max_length=254, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "users"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.username} ({self.role})"


class AdminSetting(models.Model):
    class Category(models.TextChoices):
        ATTENDANCE = "Attendance", "Attendance"
        WAGES = "Wages", "Wages"
        GENERAL = "General", "General"
        NOTIFICATIONS = "Notifications", "Notifications"

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    setting_key = models.CharField(max_length=100, unique=True)
    setting_value = models.JSONField()
    category = models.CharField(max_length=20, choices=Category.choices)
    description = models.TextField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "admin_settings"
        ordering = ["updated_at"]

    def __str__(self):
        return self.setting_key
