# accounting/api/serializers/__init__.py

from accounting.api.serializers.accounts import AccountSerializer, AccountSummarySerializer
from accounting.api.serializers.journal_entries import (
    JournalEntryDetailSerializer,
    JournalEntrySerializer,
    JournalLineSerializer,
)
from accounting.api.serializers.petty_cash import PettyCashSerializer

__all__ = [
    "AccountSerializer",
    "AccountSummarySerializer",
    "JournalEntrySerializer",
    "JournalEntryDetailSerializer",
    "JournalLineSerializer",
    "PettyCashSerializer",
]
