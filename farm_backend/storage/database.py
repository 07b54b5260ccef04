# storage/database.py
"""
PATH: storage/database.py

DATABASE STORAGE (Django ORM)

Each resource maps to one model (see storage.resources). Reference ids are
plain CharFields, so nothing here joins across models.

Journal posting:
- each line's balance change is one UPDATE ... SET balance = balance + delta
- there is deliberately no transaction.atomic() around entry + lines; a
  failure midway leaves earlier lines applied
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.apps import apps
from django.db.models import F

from storage.base import FarmStorage, Record
from storage.resources import get_resource


def _to_record(obj) -> Record:
    return {f.attname: getattr(obj, f.attname) for f in obj._meta.concrete_fields}


class DatabaseStorage(FarmStorage):
    backend_name = "database"

    def _model(self, resource: str):
        return apps.get_model(get_resource(resource).model)

    def list(self, resource, filters=None, date_field=None, start=None, end=None):
        res = get_resource(resource)
        qs = self._model(resource).objects.filter(**(filters or {}))

        if date_field and start is not None:
            qs = qs.filter(**{f"{date_field}__gte": start})
        if date_field and end is not None:
            qs = qs.filter(**{f"{date_field}__lte": end})

        return [_to_record(obj) for obj in qs.order_by(res.ordering, "pk")]

    def get(self, resource, record_id) -> Optional[Record]:
        obj = self._model(resource).objects.filter(pk=record_id).first()
        return _to_record(obj) if obj is not None else None

    def create(self, resource, data) -> Record:
        obj = self._model(resource).objects.create(**data)
        return _to_record(obj)

    def update(self, resource, record_id, changes) -> Optional[Record]:
        obj = self._model(resource).objects.filter(pk=record_id).first()
        if obj is None:
            return None

        for field, value in changes.items():
            if field != "id":
                setattr(obj, field, value)
        obj.save()
        return _to_record(obj)

    def delete(self, resource, record_id) -> bool:
        deleted, _ = self._model(resource).objects.filter(pk=record_id).delete()
        return deleted > 0

    def _increment_balance(self, account_id: str, delta: Decimal) -> bool:
        updated = (
            self._model("accounts")
            .objects.filter(pk=account_id)
            .update(balance=F("balance") + delta)
        )
        return updated > 0

    def dashboard_stats(self) -> dict[str, int]:
        items = self._model("inventory_items").objects
        return {
            "total_plots": self._model("plots").objects.count(),
            "total_employees": self._model("users").objects.count(),
            "total_animals": self._model("animals").objects.count(),
            "inventory_alerts": items.filter(
                current_stock__lte=F("reorder_level")
            ).count(),
        }
