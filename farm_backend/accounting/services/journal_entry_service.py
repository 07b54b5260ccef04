# accounting/services/journal_entry_service.py

"""
======================================================
PATH: accounting/services/journal_entry_service.py
======================================================
JOURNAL ENTRY SERVICE

This module is the ONLY place allowed to post journal entries.

Posting (delegated to the storage backend):
- persist the entry
- for each line: persist the line, add (debit - credit) to its account

Deliberately NOT done here:
- debit == credit enforcement (an unbalanced entry is logged, then posted)
- atomicity across lines (a failure midway leaves earlier lines applied)
- idempotency (posting the same payload twice doubles its effect)
"""

from __future__ import annotations

import logging

from accounting.services.exceptions import BalanceOutOfRangeError, JournalEntryCreationError
from accounting.services.ledger import BALANCE_LIMIT, deltas_by_account, summarize_lines
from storage.records import to_decimal

logger = logging.getLogger(__name__)


def post_journal_entry(*, storage, entry: dict, lines: list[dict]) -> dict:
    if not lines:
        raise JournalEntryCreationError("Journal entry must have at least one line")

    check_balance_range(storage=storage, lines=lines)

    totals = summarize_lines(lines)
    if not totals["balanced"]:
        logger.warning(
            "Posting unbalanced journal entry %r: debit=%s credit=%s",
            entry.get("description"),
            totals["debit"],
            totals["credit"],
        )

    created = storage.create_journal_entry(entry, lines)

    logger.info(
        "Posted journal entry %s (%s lines, debit=%s credit=%s)",
        created["id"],
        len(lines),
        totals["debit"],
        totals["credit"],
    )
    return created


def check_balance_range(*, storage, lines: list[dict]) -> None:
    """
    Refuse an entry that would leave any existing account outside the
    storable balance range. Unknown accounts are skipped, as in posting.
    """
    for account_id, delta in deltas_by_account(lines).items():
        account = storage.get("accounts", account_id)
        if account is None:
            continue

        projected = to_decimal(account.get("balance")) + delta
        if abs(projected) > BALANCE_LIMIT:
            raise BalanceOutOfRangeError(
                f"Account {account.get('account_code') or account_id} balance would "
                f"become {projected}, outside the storable range of +/-{BALANCE_LIMIT}"
            )


def journal_entry_detail(*, storage, entry: dict) -> dict:
    """Entry with its lines (in posting order) and debit/credit totals."""
    lines = storage.journal_lines(entry["id"])
    return {**entry, "lines": lines, "totals": summarize_lines(lines)}
