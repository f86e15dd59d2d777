"""
Service API key lifecycle and authentication.

Owns the rules around credential records: names are normalized before any
store access, the raw key is generated here and returned exactly once, and
only its peppered hash reaches the repository.

Usage:
    service = ApiKeysService(ApiKeyRepository(db), pepper=config.auth.pepper)
    raw_key, record = service.create_service_key("draft-kit")
    client = service.authenticate_api_key(raw_key)
"""

from __future__ import annotations

import logging
from typing import Protocol

from fantasy_baseball.api_keys.crypto import generate_raw_api_key, hash_api_key
from fantasy_baseball.api_keys.models import (
    ApiKeyClient,
    ApiKeyPublic,
    ApiKeyStatus,
    api_key_to_client,
    api_key_to_public,
)
from fantasy_baseball.api_keys.validation import normalize_service_name, parse_status
from fantasy_baseball.errors import ForbiddenError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class ApiKeyStore(Protocol):
    """What the service needs from a repository."""

    def insert(self, service_name: str, key_hash: str, key_prefix: str) -> dict: ...
    def find_by_id(self, key_id: str) -> dict | None: ...
    def find_by_name(self, service_name: str) -> dict | None: ...
    def find_by_hash(self, key_hash: str) -> dict | None: ...
    def update_key(self, service_name: str, key_hash: str, key_prefix: str) -> dict | None: ...
    def update_status(self, service_name: str, status: str) -> dict | None: ...
    def delete(self, service_name: str) -> bool: ...


class ApiKeysService:
    def __init__(self, repository: ApiKeyStore, pepper: str) -> None:
        self.repository = repository
        self._pepper = pepper

    # ─── Lifecycle ───────────────────────────────────────────────────────

    def create_service_key(self, service_name: object) -> tuple[str, ApiKeyPublic]:
        """Create an active credential. Returns (raw_key, public record).

        Raises:
            ValidationError: bad service name.
            ConflictError: a record for this service already exists.
        """
        name = normalize_service_name(service_name)
        raw_key, prefix = generate_raw_api_key(name)
        row = self.repository.insert(name, hash_api_key(raw_key, self._pepper), prefix)
        logger.info("Created API key for service %s (prefix %s)", name, prefix)
        return raw_key, api_key_to_public(row)

    def rotate_service_key(self, service_name: object) -> tuple[str, ApiKeyPublic]:
        """Replace the secret of an existing service. Status is left as it was."""
        name = normalize_service_name(service_name)
        raw_key, prefix = generate_raw_api_key(name)
        row = self.repository.update_key(name, hash_api_key(raw_key, self._pepper), prefix)
        if row is None:
            raise NotFoundError(f"Service not found: {name}")
        logger.info("Rotated API key for service %s (prefix %s)", name, prefix)
        return raw_key, api_key_to_public(row)

    def set_service_status(self, service_name: object, status: object) -> ApiKeyPublic:
        name = normalize_service_name(service_name)
        new_status = parse_status(status)
        row = self.repository.update_status(name, new_status.value)
        if row is None:
            raise NotFoundError(f"Service not found: {name}")
        logger.info("Set API key status for service %s to %s", name, new_status)
        return api_key_to_public(row)

    def delete_service_key(self, service_name: object) -> dict:
        name = normalize_service_name(service_name)
        if not self.repository.delete(name):
            raise NotFoundError(f"Service not found: {name}")
        logger.info("Deleted API key for service %s", name)
        return {"serviceName": name, "deleted": True}

    # ─── Authentication ──────────────────────────────────────────────────

    def authenticate_api_key(self, raw_key: str | None) -> ApiKeyClient:
        """Resolve a presented raw key to its identity context.

        Raises:
            UnauthorizedError: empty key, or no record matches its hash.
            ForbiddenError: the record exists but is not active.
        """
        candidate = (raw_key or "").strip()
        if not candidate:
            raise UnauthorizedError("Missing API key")

        row = self.repository.find_by_hash(hash_api_key(candidate, self._pepper))
        if row is None:
            raise UnauthorizedError("Invalid API key")
        if row["status"] != ApiKeyStatus.ACTIVE:
            logger.warning("Rejected inactive API key for service %s", row["service_name"])
            raise ForbiddenError("API key is inactive")
        return api_key_to_client(row)

    # ─── Lookup ──────────────────────────────────────────────────────────

    def get_service_by_id(self, key_id: str) -> ApiKeyPublic:
        row = self.repository.find_by_id(key_id)
        if row is None:
            raise NotFoundError("API key service not found")
        return api_key_to_public(row)

    def get_service_by_name(self, service_name: object) -> ApiKeyPublic:
        name = normalize_service_name(service_name)
        row = self.repository.find_by_name(name)
        if row is None:
            raise NotFoundError(f"Service not found: {name}")
        return api_key_to_public(row)
