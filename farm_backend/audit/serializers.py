# audit/serializers.py

from rest_framework import serializers

from storage.api.serializers import RecordSerializer


class AuditLogSerializer(RecordSerializer):
    createdAt = None

    userId = serializers.CharField(source="user_id", max_length=36)
    action = serializers.CharField(max_length=20)
    module = serializers.CharField(max_length=50)
    entityType = serializers.CharField(
        source="entity_type", max_length=50, allow_null=True, allow_blank=True, default=None
    )
    entityId = serializers.CharField(
        source="entity_id", max_length=36, allow_null=True, allow_blank=True, default=None
    )
    changes = serializers.JSONField(allow_null=True, default=None)
    ipAddress = serializers.CharField(
        source="ip_address", max_length=45, allow_null=True, allow_blank=True, default=None
    )
    timestamp = serializers.DateTimeField(read_only=True)
