# backend/exceptions.py
"""
PATH: backend/exceptions.py

API EXCEPTION HANDLER

Three-way split for every endpoint:
- validation failure  -> 400 with DRF's field -> [messages] mapping
- missing record      -> 404 {"detail": "<Entity> not found"}
- anything else       -> 500 {"detail": "Internal server error"} (logged)

DRF already renders its own APIException subclasses (ValidationError, NotFound,
NotAuthenticated, PermissionDenied, Throttled). We only add the 500 fallback
so unhandled errors never leak a traceback to the client.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled API error in %s", view.__class__.__name__ if view else "unknown view",
        exc_info=exc,
    )
    return Response(
        {"detail": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
