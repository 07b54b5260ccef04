# storage/api/serializers.py

from __future__ import annotations

from rest_framework import serializers

from storage import get_storage


class RecordSerializer(serializers.Serializer):
    """
    Base for every storage-backed resource.

    Wire keys are camelCase; `source=` maps them to the snake_case record keys
    that storage persists. Optional fields declare `allow_null=True, default=None`
    so a created record always carries every key.
    """

    id = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)


class UniqueInStorage:
    """
    Field validator: reject a value already used by another record.

    The view passes the id of the record being updated as
    context["record_id"] so a record may keep its own value.
    """

    requires_context = True

    def __init__(self, resource: str, field: str, message: str | None = None):
        self.resource = resource
        self.field = field
        self.message = message or f"A record with this {field} already exists."

    def __call__(self, value, serializer_field):
        existing = get_storage().find(self.resource, **{self.field: value})
        if existing is None:
            return

        record_id = serializer_field.parent.context.get("record_id")
        if existing["id"] != record_id:
            raise serializers.ValidationError(self.message, code="unique")
