"""
Input sanitization for request bodies.

Strips markup and script vectors from free-text fields before validation.
SQL injection is handled by parameterized queries, not here.
"""

from __future__ import annotations

import re
from typing import Any

_ANGLE_RE = re.compile(r"[<>]")
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def sanitize_string(value: object) -> str:
    """Remove angle brackets, ``javascript:`` and ``onX=`` handlers, then trim.

    Non-string input yields an empty string.
    """
    if not isinstance(value, str):
        return ""
    value = _ANGLE_RE.sub("", value)
    value = _JS_PROTOCOL_RE.sub("", value)
    value = _EVENT_HANDLER_RE.sub("", value)
    return value.strip()


def sanitize_object(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy with every string value sanitized, recursing into dicts.

    Lists have their string items sanitized; other items pass through.
    """
    cleaned: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            cleaned[key] = sanitize_string(value)
        elif isinstance(value, list):
            cleaned[key] = [sanitize_string(v) if isinstance(v, str) else v for v in value]
        elif isinstance(value, dict):
            cleaned[key] = sanitize_object(value)
        else:
            cleaned[key] = value
    return cleaned


def sanitize_email(value: object) -> str:
    """Sanitize and lowercase an email address; empty string if malformed."""
    email = sanitize_string(value).lower()
    return email if _EMAIL_RE.match(email) else ""
