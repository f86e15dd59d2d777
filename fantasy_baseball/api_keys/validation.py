"""
API key input validation.

Every service name and status passes through here before any store access.

Usage:
    from fantasy_baseball.api_keys.validation import normalize_service_name

    name = normalize_service_name("  Draft-Kit ")   # "draft-kit"
"""

from __future__ import annotations

import re

from fantasy_baseball.api_keys.models import ApiKeyStatus
from fantasy_baseball.errors import ValidationError

SERVICE_NAME_MIN = 2
SERVICE_NAME_MAX = 64

_SERVICE_NAME_RE = re.compile(r"^[a-z0-9-]+$")


def normalize_service_name(value: object) -> str:
    """Trim and lowercase a service name, then validate it.

    Raises:
        ValidationError: not a string, wrong length, or illegal characters.
    """
    if not isinstance(value, str):
        raise ValidationError("Service name must be a string")

    name = value.strip().lower()
    if len(name) < SERVICE_NAME_MIN:
        raise ValidationError(f"Service name must be at least {SERVICE_NAME_MIN} characters")
    if len(name) > SERVICE_NAME_MAX:
        raise ValidationError(f"Service name must be at most {SERVICE_NAME_MAX} characters")
    if not _SERVICE_NAME_RE.match(name):
        raise ValidationError("Service name must be lowercase letters, numbers, or hyphens")
    return name


def parse_status(value: object) -> ApiKeyStatus:
    """Parse 'active' / 'inactive' into an ApiKeyStatus."""
    if isinstance(value, str):
        value = value.strip().lower()
    try:
        return ApiKeyStatus(value)
    except ValueError:
        raise ValidationError(
            f"Invalid status {value!r}: expected one of "
            + ", ".join(s.value for s in ApiKeyStatus)
        ) from None
