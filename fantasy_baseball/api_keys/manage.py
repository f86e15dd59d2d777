"""
Administrative API key management, as used by ``fantasy-baseball api-keys``.

Each run brackets one operation between connect and disconnect; disconnect
is always attempted. The raw key is printed only by ``create`` and ``rotate``.

Usage:
    fantasy-baseball api-keys create draft-kit
    fantasy-baseball api-keys set-status draft-kit inactive
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fantasy_baseball.api_keys.models import ApiKeyPublic
from fantasy_baseball.api_keys.service import ApiKeysService
from fantasy_baseball.db.connection import Database

logger = logging.getLogger(__name__)

ACTIONS = ("create", "rotate", "set-status", "show", "delete")

USAGE = (
    "Usage: fantasy-baseball api-keys <create|rotate|set-status|show|delete> "
    "<service-name> [active|inactive]"
)


def _print(message: str) -> None:
    print(message)


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


@dataclass
class ManageApiKeysDeps:
    """Collaborators for one management run. Tests pass fakes."""

    connect: Callable[[], object]
    disconnect: Callable[[], object]
    create: Callable[[str], tuple[str, ApiKeyPublic]]
    rotate: Callable[[str], tuple[str, ApiKeyPublic]]
    set_status: Callable[[str, str], ApiKeyPublic]
    show: Callable[[str], ApiKeyPublic]
    delete: Callable[[str], dict]
    log: Callable[[str], None] = _print
    error: Callable[[str], None] = _print_error


def deps_for(service: ApiKeysService, db: Database) -> ManageApiKeysDeps:
    return ManageApiKeysDeps(
        connect=db.open,
        disconnect=db.close,
        create=service.create_service_key,
        rotate=service.rotate_service_key,
        set_status=service.set_service_status,
        show=service.get_service_by_name,
        delete=service.delete_service_key,
    )


def _print_summary(deps: ManageApiKeysDeps, api_key: ApiKeyPublic) -> None:
    deps.log(f"Service: {api_key.serviceName}")
    deps.log(f"Status: {api_key.status}")
    deps.log(f"Key Prefix: {api_key.keyPrefix}")


def run_manage_api_keys(args: Sequence[str], deps: ManageApiKeysDeps) -> int:
    """Run one management action. Returns the process exit code."""
    action = args[0] if len(args) > 0 else ""
    service_name = args[1] if len(args) > 1 else ""
    status = args[2] if len(args) > 2 else ""

    if action not in ACTIONS or not service_name:
        deps.error(USAGE)
        return 1

    if action == "set-status" and not status:
        deps.error("set-status requires a status: active or inactive")
        deps.error(USAGE)
        return 1

    try:
        deps.connect()

        if action == "create":
            raw_key, api_key = deps.create(service_name)
            _print_summary(deps, api_key)
            deps.log(f"Raw API Key (store securely): {raw_key}")
        elif action == "rotate":
            raw_key, api_key = deps.rotate(service_name)
            _print_summary(deps, api_key)
            deps.log(f"New Raw API Key (store securely): {raw_key}")
        elif action == "set-status":
            api_key = deps.set_status(service_name, status)
            deps.log(f"Service: {api_key.serviceName}")
            deps.log(f"Updated status: {api_key.status}")
        elif action == "delete":
            result = deps.delete(service_name)
            deps.log(f"Deleted service key for: {result['serviceName']}")
        else:
            api_key = deps.show(service_name)
            _print_summary(deps, api_key)
            deps.log(f"Created At: {api_key.createdAt.isoformat()}")
            deps.log(f"Updated At: {api_key.updatedAt.isoformat()}")
        return 0
    except Exception as e:
        logger.debug("api-keys %s failed", action, exc_info=True)
        deps.error(f"Failed to manage API key: {getattr(e, 'message', None) or e}")
        return 1
    finally:
        try:
            deps.disconnect()
        except Exception as e:
            deps.error(f"Failed to disconnect: {e}")
