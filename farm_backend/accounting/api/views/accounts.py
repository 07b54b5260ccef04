# accounting/api/views/accounts.py

"""
PATH: accounting/api/views/accounts.py

ACCOUNTS API

- GET/POST /api/accounts            (?accountType= filter)
- GET/PATCH /api/accounts/<id>      (balance is never writable)
- GET /api/accounts/summary         (sum of balances per account type)
"""

from decimal import Decimal

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from accounting.api.serializers import AccountSerializer, AccountSummarySerializer
from accounting.services.ledger import balances_by_type
from permissions.roles import ROLE_MANAGER
from storage.api.viewsets import MutableRecordViewSet


@extend_schema(
    tags=["accounting"],
    parameters=[OpenApiParameter(name="accountType", type=str, required=False)],
)
class AccountViewSet(MutableRecordViewSet):
    resource = "accounts"
    serializer_class = AccountSerializer
    list_filters = {"accountType": "account_type"}
    write_role = ROLE_MANAGER

    def perform_create(self, data):
        data["balance"] = Decimal("0.00")
        return super().perform_create(data)

    @extend_schema(responses={200: AccountSummarySerializer})
    @action(detail=False, methods=["get"], url_path="summary")
    def summary(self, request):
        summary = balances_by_type(self.storage.list(self.resource))
        return Response(AccountSummarySerializer(summary).data)
