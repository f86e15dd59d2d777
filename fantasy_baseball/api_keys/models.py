"""API key response models (never include the key hash)."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class ApiKeyStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ApiKeyPublic(BaseModel):
    """Public view of a service credential record."""

    id: str
    serviceName: str
    status: ApiKeyStatus
    keyPrefix: str
    createdAt: datetime
    updatedAt: datetime


class ApiKeyClient(BaseModel):
    """Identity context attached to an authenticated request."""

    keyId: str
    serviceName: str
    status: ApiKeyStatus


def api_key_to_public(row: dict) -> ApiKeyPublic:
    """Convert a service_api_keys row to the public view."""
    return ApiKeyPublic(
        id=str(row["id"]),
        serviceName=row["service_name"],
        status=ApiKeyStatus(row["status"]),
        keyPrefix=row["key_prefix"],
        createdAt=row["created_at"],
        updatedAt=row["updated_at"],
    )


def api_key_to_client(row: dict) -> ApiKeyClient:
    """Convert a service_api_keys row to the minimal identity context."""
    return ApiKeyClient(
        keyId=str(row["id"]),
        serviceName=row["service_name"],
        status=ApiKeyStatus(row["status"]),
    )
