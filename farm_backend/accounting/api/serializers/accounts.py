# accounting/api/serializers/accounts.py

from rest_framework import serializers

from accounting.models.account import Account
from storage.api.serializers import RecordSerializer, UniqueInStorage


class AccountSerializer(RecordSerializer):
    """
    Chart-of-accounts entry.

    balance is read-only: it starts at zero and only journal lines move it.
    """

    accountCode = serializers.CharField(
        source="account_code",
        max_length=20,
        validators=[UniqueInStorage("accounts", "account_code", "Account code already exists")],
    )
    accountName = serializers.CharField(source="account_name", max_length=150)
    accountType = serializers.ChoiceField(source="account_type", choices=Account.ACCOUNT_TYPES)
    parentAccountId = serializers.CharField(
        source="parent_account_id", max_length=36, allow_null=True, default=None
    )
    balance = serializers.DecimalField(max_digits=15, decimal_places=2, read_only=True)
    isActive = serializers.BooleanField(source="is_active", default=True)

    def validate_accountCode(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Account code is required")
        return value


class AccountSummarySerializer(serializers.Serializer):
    """Sum of balances per account type."""

    totals = serializers.DictField(
        child=serializers.DecimalField(max_digits=17, decimal_places=2)
    )
    accountCount = serializers.IntegerField(source="account_count")
