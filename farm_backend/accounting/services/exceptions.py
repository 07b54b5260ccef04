# accounting/services/exceptions.py

"""
FINANCE SERVICE ERRORS

Raised by the journal service before anything reaches storage.
Validation of request payloads stays in the serializers.
"""


class AccountingServiceError(Exception):
    """Base for farm finance service failures."""


class JournalEntryCreationError(AccountingServiceError):
    """The entry cannot be posted (e.g. it has no lines)."""


class BalanceOutOfRangeError(AccountingServiceError):
    """Posting would push an account balance past what the column can store."""
