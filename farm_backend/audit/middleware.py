# audit/middleware.py
"""
PATH: audit/middleware.py

AUDIT TRAIL MIDDLEWARE

Every non-GET request under /api/ that carries X-User-Id is recorded in
audit_logs before the view runs:
- action  : HTTP method
- module  : first path segment after /api/ ("plots", "journal-entries")
- changes : {"path": ..., "body": ...}

An audit write failure is logged and never fails the request.
"""

from __future__ import annotations

import json
import logging

from storage import get_storage

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"
SKIPPED_METHODS = {"GET", "HEAD", "OPTIONS"}
REDACTED_KEYS = {"password"}


def module_from_path(path: str) -> str | None:
    if not path.startswith(API_PREFIX):
        return None
    segment = path[len(API_PREFIX):].split("/", 1)[0]
    return segment or None


def _redact(body):
    if isinstance(body, dict):
        return {
            key: "***" if key in REDACTED_KEYS else value
            for key, value in body.items()
        }
    return body


def request_body(request):
    """Parsed JSON body, raw text for anything else, None when empty."""
    raw = request.body
    if not raw:
        return None

    try:
        text = raw.decode(request.encoding or "utf-8")
    except UnicodeDecodeError:
        return None

    try:
        return _redact(json.loads(text))
    except ValueError:
        return text


def client_ip(request) -> str | None:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


class AuditLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.method not in SKIPPED_METHODS:
            self.record(request)
        return self.get_response(request)

    def record(self, request):
        user_id = (request.headers.get("X-User-Id") or "").strip()
        module = module_from_path(request.path)
        if not user_id or not module:
            return

        try:
            get_storage().create(
                "audit_logs",
                {
                    "user_id": user_id,
                    "action": request.method,
                    "module": module,
                    "entity_type": None,
                    "entity_id": None,
                    "changes": {"path": request.path, "body": request_body(request)},
                    "ip_address": client_ip(request),
                },
            )
        except Exception:
            logger.exception(
                "Audit logging failed for %s %s (user=%s)",
                request.method,
                request.path,
                user_id,
            )
