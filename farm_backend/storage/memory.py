# storage/memory.py
"""
PATH: storage/memory.py

IN-MEMORY STORAGE

Dict per resource, insertion ordered, owned by this object (no module globals).
Callers receive copies; mutating a returned dict never touches the store.

Balance updates are read-then-write and are not safe under concurrent
requests (runserver is threaded). This is a known gap; the database
backend increments balances with an F() expression instead.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from django.utils import timezone

from storage.base import FarmStorage, Record
from storage.records import new_id, to_decimal
from storage.resources import RESOURCES, get_resource


def _matches(record: dict, filters: Optional[dict]) -> bool:
    if not filters:
        return True
    return all(record.get(key) == value for key, value in filters.items())


def _in_range(
    record: dict, date_field: Optional[str], start: Optional[date], end: Optional[date]
) -> bool:
    if not date_field or (start is None and end is None):
        return True
    value = record.get(date_field)
    if value is None:
        return False
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


class MemoryStorage(FarmStorage):
    backend_name = "memory"

    def __init__(self):
        self._tables: dict[str, dict[str, dict]] = {name: {} for name in RESOURCES}

    def _table(self, resource: str) -> dict[str, dict]:
        get_resource(resource)
        return self._tables[resource]

    def list(self, resource, filters=None, date_field=None, start=None, end=None):
        return [
            dict(row)
            for row in self._table(resource).values()
            if _matches(row, filters) and _in_range(row, date_field, start, end)
        ]

    def get(self, resource, record_id) -> Optional[Record]:
        row = self._table(resource).get(str(record_id))
        return dict(row) if row is not None else None

    def create(self, resource, data) -> Record:
        res = get_resource(resource)
        record = dict(data)
        record["id"] = new_id()
        if res.timestamp:
            record[res.timestamp] = timezone.now()
        self._table(resource)[record["id"]] = record
        return dict(record)

    def update(self, resource, record_id, changes) -> Optional[Record]:
        res = get_resource(resource)
        row = self._table(resource).get(str(record_id))
        if row is None:
            return None
        row.update({k: v for k, v in changes.items() if k != "id"})
        if res.touch and res.timestamp:
            row[res.timestamp] = timezone.now()
        return dict(row)

    def delete(self, resource, record_id) -> bool:
        return self._table(resource).pop(str(record_id), None) is not None

    def _increment_balance(self, account_id: str, delta: Decimal) -> bool:
        account = self._tables["accounts"].get(str(account_id))
        if account is None:
            return False
        account["balance"] = to_decimal(account.get("balance")) + delta
        return True
