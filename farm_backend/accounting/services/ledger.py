# accounting/services/ledger.py

"""
LEDGER ARITHMETIC

Pure helpers shared by the storage backends and the journal service.
No storage or model imports here (storage.base imports this module).

Sign convention is mechanical, independent of account type:
    delta = debit - credit
so crediting a revenue account drives its balance negative.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from storage.records import money, to_decimal

ACCOUNT_TYPES = ("Asset", "Liability", "Equity", "Revenue", "Expense")

# accounts.balance is DECIMAL(15, 2)
BALANCE_LIMIT = Decimal("9999999999999.99")


def line_delta(line: dict) -> Decimal:
    return to_decimal(line.get("debit")) - to_decimal(line.get("credit"))


def deltas_by_account(lines: Iterable[dict]) -> dict[str, Decimal]:
    """Net (debit - credit) per account_id, in first-seen order."""
    deltas: dict[str, Decimal] = {}
    for line in lines:
        account_id = line.get("account_id")
        deltas[account_id] = deltas.get(account_id, Decimal("0.00")) + line_delta(line)
    return deltas


def summarize_lines(lines: Iterable[dict]) -> dict:
    debit = Decimal("0.00")
    credit = Decimal("0.00")
    for line in lines:
        debit += to_decimal(line.get("debit"))
        credit += to_decimal(line.get("credit"))

    debit = money(debit)
    credit = money(credit)
    return {"debit": debit, "credit": credit, "balanced": debit == credit}


def balances_by_type(accounts: Iterable[dict], *, active_only: bool = False) -> dict:
    """
    Sum account balances per account type.

    Every type is present in the result (zero when no account has it), plus
    an "account_count" for the accounts included.
    """
    totals = {account_type: Decimal("0.00") for account_type in ACCOUNT_TYPES}
    count = 0

    for account in accounts:
        if active_only and not account.get("is_active", True):
            continue
        account_type = account.get("account_type")
        totals[account_type] = totals.get(account_type, Decimal("0.00")) + to_decimal(
            account.get("balance")
        )
        count += 1

    return {
        "totals": {key: money(value) for key, value in totals.items()},
        "account_count": count,
    }
