# accounting/api/serializers/journal_entries.py

from decimal import Decimal

from rest_framework import serializers

from storage.api.serializers import RecordSerializer

AMOUNT = {
    "max_digits": 15,
    "decimal_places": 2,
    "min_value": Decimal("0"),
    "default": Decimal("0.00"),
}


class JournalLineSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    journalEntryId = serializers.CharField(source="journal_entry_id", read_only=True)
    lineNumber = serializers.IntegerField(source="line_number", read_only=True)
    accountId = serializers.CharField(source="account_id", max_length=36)
    debit = serializers.DecimalField(**AMOUNT)
    credit = serializers.DecimalField(**AMOUNT)
    description = serializers.CharField(allow_null=True, allow_blank=True, default=None)


class JournalTotalsSerializer(serializers.Serializer):
    debit = serializers.DecimalField(max_digits=17, decimal_places=2)
    credit = serializers.DecimalField(max_digits=17, decimal_places=2)
    balanced = serializers.BooleanField()


class JournalEntrySerializer(RecordSerializer):
    """
    POST body: entry fields + a non-empty `lines` array.

    createdBy may be omitted when the request carries X-User-Id.
    The create response is the entry only; lines come from the detail GET.
    """

    entryDate = serializers.DateField(source="entry_date")
    description = serializers.CharField()
    reference = serializers.CharField(
        max_length=100, allow_null=True, allow_blank=True, default=None
    )
    createdBy = serializers.CharField(source="created_by", max_length=36, required=False)
    lines = JournalLineSerializer(many=True, allow_empty=False, write_only=True)


class JournalEntryDetailSerializer(JournalEntrySerializer):
    lines = JournalLineSerializer(many=True, read_only=True)
    totals = JournalTotalsSerializer(read_only=True)
