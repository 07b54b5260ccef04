# accounting/api/views/journal_entries.py

"""
PATH: accounting/api/views/journal_entries.py

JOURNAL ENTRIES API (APPEND-ONLY)

- GET /api/journal-entries            (?reference=, ?startDate=&endDate= on entryDate)
- POST /api/journal-entries           body: entry fields + non-empty `lines`
- GET /api/journal-entries/<id>       entry + lines + totals {debit, credit, balanced}

Posting goes through accounting.services.journal_entry_service only.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from accounting.api.serializers import JournalEntryDetailSerializer, JournalEntrySerializer
from accounting.services.exceptions import BalanceOutOfRangeError
from accounting.services.journal_entry_service import journal_entry_detail, post_journal_entry
from permissions.roles import ROLE_MANAGER
from storage.api.viewsets import AppendOnlyViewSet


@extend_schema(
    tags=["accounting"],
    parameters=[
        OpenApiParameter(name="reference", type=str, required=False),
        OpenApiParameter(name="startDate", type=str, required=False),
        OpenApiParameter(name="endDate", type=str, required=False),
    ],
)
class JournalEntryViewSet(AppendOnlyViewSet):
    resource = "journal_entries"
    serializer_class = JournalEntrySerializer
    list_filters = {"reference": "reference"}
    date_range_field = "entry_date"
    write_role = ROLE_MANAGER

    def get_serializer_class(self):
        if self.action == "retrieve":
            return JournalEntryDetailSerializer
        return JournalEntrySerializer

    def retrieve(self, request, *args, **kwargs):
        detail = journal_entry_detail(storage=self.storage, entry=self.get_record())
        return Response(self.get_serializer(detail).data)

    def perform_create(self, data):
        lines = [dict(line) for line in data.pop("lines")]

        if not data.get("created_by"):
            user = self.request.user
            if not (user and user.is_authenticated):
                raise ValidationError({"createdBy": ["This field is required."]})
            data["created_by"] = user.id

        try:
            return post_journal_entry(storage=self.storage, entry=data, lines=lines)
        except BalanceOutOfRangeError as exc:
            raise ValidationError({"lines": [str(exc)]}) from exc
