# storage/api/viewsets.py
"""
======================================================
PATH: storage/api/viewsets.py
======================================================
STORAGE-BACKED VIEWSETS

Views never touch models directly; every read and write goes through the
configured FarmStorage backend.

Each concrete viewset declares:
- resource         : storage resource name ("plots")
- serializer_class : camelCase wire schema
- list_filters     : {query param: record field}, e.g. {"plotId": "plot_id"}
- date_params      : query params parsed as YYYY-MM-DD dates
- required_filters : list 400s unless at least one of these params is given
- date_range_field : field filtered by ?startDate=&endDate= (inclusive)
- write_role / delete_role : minimum roles when FARM_ENFORCE_ROLES is on

Actions come from the record mixins, so routes exist only for what a
resource supports (financial and movement records have no update/delete).
"""

from __future__ import annotations

import logging

from django.utils.dateparse import parse_date
from rest_framework import status, viewsets
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response

from permissions.roles import DEFAULT_DELETE_ROLE, DEFAULT_WRITE_ROLE, MinimumRole
from storage import get_storage
from storage.resources import get_resource

logger = logging.getLogger(__name__)


class MissingFilter(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A filter query parameter is required."
    default_code = "missing_filter"


class StorageGenericViewSet(viewsets.GenericViewSet):
    resource: str = ""
    list_filters: dict[str, str] = {}
    date_params: frozenset[str] = frozenset()
    required_filters: tuple[str, ...] = ()
    date_range_field: str | None = None

    permission_classes = [MinimumRole]
    write_role = DEFAULT_WRITE_ROLE
    delete_role = DEFAULT_DELETE_ROLE

    lookup_value_regex = "[^/]+"

    @property
    def storage(self):
        return get_storage()

    @property
    def entity_label(self) -> str:
        return get_resource(self.resource).entity

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["record_id"] = self.kwargs.get(self.lookup_url_kwarg or self.lookup_field)
        return context

    # -------------------------
    # Query params
    # -------------------------
    def parse_date_param(self, param: str, raw: str):
        try:
            value = parse_date(raw)
        except ValueError:
            value = None
        if value is None:
            raise ValidationError({param: ["Date has wrong format. Use YYYY-MM-DD."]})
        return value

    def get_list_filters(self) -> dict:
        params = self.request.query_params
        filters = {}

        for param, field in self.list_filters.items():
            raw = (params.get(param) or "").strip()
            if not raw:
                continue
            filters[field] = (
                self.parse_date_param(param, raw) if param in self.date_params else raw
            )

        if self.required_filters and not any(
            (params.get(p) or "").strip() for p in self.required_filters
        ):
            raise MissingFilter(
                f"{' or '.join(self.required_filters)} query parameter is required"
            )

        return filters

    def get_date_range(self) -> tuple:
        if not self.date_range_field:
            return None, None

        params = self.request.query_params
        start = (params.get("startDate") or "").strip()
        end = (params.get("endDate") or "").strip()
        return (
            self.parse_date_param("startDate", start) if start else None,
            self.parse_date_param("endDate", end) if end else None,
        )

    # -------------------------
    # Records
    # -------------------------
    def get_records(self) -> list[dict]:
        filters = self.get_list_filters()
        start, end = self.get_date_range()
        return self.storage.list(
            self.resource,
            filters=filters,
            date_field=self.date_range_field,
            start=start,
            end=end,
        )

    def lookup_record(self, lookup_value: str) -> dict | None:
        return self.storage.get(self.resource, lookup_value)

    def get_record(self) -> dict:
        lookup_value = self.kwargs[self.lookup_url_kwarg or self.lookup_field]
        record = self.lookup_record(lookup_value)
        if record is None:
            raise NotFound(f"{self.entity_label} not found")
        return record

    def perform_create(self, data: dict) -> dict:
        return self.storage.create(self.resource, data)

    def perform_update(self, record: dict, changes: dict) -> dict:
        updated = self.storage.update(self.resource, record["id"], changes)
        if updated is None:
            raise NotFound(f"{self.entity_label} not found")
        return updated


# =========================================================
# Record mixins
# =========================================================
class ListRecordsMixin:
    def list(self, request, *args, **kwargs):
        records = self.get_records()
        return Response(self.get_serializer(records, many=True).data)


class RetrieveRecordMixin:
    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.get_record()).data)


class CreateRecordMixin:
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = self.perform_create(dict(serializer.validated_data))
        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)


class UpdateRecordMixin:
    def partial_update(self, request, *args, **kwargs):
        record = self.get_record()
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = self.perform_update(record, dict(serializer.validated_data))
        return Response(self.get_serializer(updated).data)


class DestroyRecordMixin:
    def destroy(self, request, *args, **kwargs):
        record = self.get_record()
        if not self.storage.delete(self.resource, record["id"]):
            raise NotFound(f"{self.entity_label} not found")
        logger.info("Deleted %s %s", self.resource, record["id"])
        return Response(status=status.HTTP_204_NO_CONTENT)


class StorageViewSet(
    ListRecordsMixin,
    RetrieveRecordMixin,
    CreateRecordMixin,
    UpdateRecordMixin,
    DestroyRecordMixin,
    StorageGenericViewSet,
):
    """Full CRUD: list, retrieve, create, partial update, delete."""


class MutableRecordViewSet(
    ListRecordsMixin,
    RetrieveRecordMixin,
    CreateRecordMixin,
    UpdateRecordMixin,
    StorageGenericViewSet,
):
    """List, retrieve, create and partial update; no delete."""


class AppendOnlyViewSet(
    ListRecordsMixin,
    RetrieveRecordMixin,
    CreateRecordMixin,
    StorageGenericViewSet,
):
    """List, retrieve and create only (financial and movement records)."""
