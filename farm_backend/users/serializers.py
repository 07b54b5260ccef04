# users/serializers.py

from rest_framework import serializers

from storage.api.serializers import RecordSerializer, UniqueInStorage
from users.models import AdminSetting, User


# ---------------- USER ----------------
class UserSerializer(RecordSerializer):
    """
    Safe user representation: the password hash is never rendered.
    """

    username = serializers.CharField(
        max_length=150,
        validators=[UniqueInStorage("users", "username", "Username already exists")],
    )
    password = serializers.CharField(
        write_only=True,
        max_length=128,
        style={"input_type": "password"},
    )
    fullName = serializers.CharField(source="full_name", max_length=200)
    role = serializers.ChoiceField(choices=User.Role.choices)
    email = serializers.EmailField(allow_null=True, allow_blank=True, default=None)
    phone = serializers.CharField(max_length=50, allow_null=True, allow_blank=True, default=None)
    isActive = serializers.BooleanField(source="is_active", default=True)


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Credentials are checked against storage in the view.
    """

    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


# ---------------- ADMIN SETTINGS ----------------
class AdminSettingSerializer(RecordSerializer):
    createdAt = None

    settingKey = serializers.CharField(
        source="setting_key",
        max_length=100,
        validators=[
            UniqueInStorage("admin_settings", "setting_key", "Setting key already exists")
        ],
    )
    settingValue = serializers.JSONField(source="setting_value")
    category = serializers.ChoiceField(choices=AdminSetting.Category.choices)
    description = serializers.CharField(allow_null=True, allow_blank=True, default=None)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


class AdminSettingValueSerializer(serializers.Serializer):
    """PATCH admin-settings/<key> body: {"value": <any JSON>}."""

    value = serializers.JSONField()
