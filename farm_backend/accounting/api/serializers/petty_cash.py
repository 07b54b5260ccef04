# accounting/api/serializers/petty_cash.py

from decimal import Decimal

from rest_framework import serializers

from accounting.models.petty_cash import PettyCash
from storage.api.serializers import RecordSerializer


class PettyCashSerializer(RecordSerializer):
    date = serializers.DateField()
    description = serializers.CharField()
    category = serializers.ChoiceField(choices=PettyCash.Category.choices)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    type = serializers.ChoiceField(choices=PettyCash.Type.choices)
    receivedBy = serializers.CharField(
        source="received_by", max_length=150, allow_null=True, allow_blank=True, default=None
    )
    approvedBy = serializers.CharField(
        source="approved_by", max_length=36, allow_null=True, default=None
    )
