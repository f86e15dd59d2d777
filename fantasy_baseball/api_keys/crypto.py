"""
Raw key generation and peppered hashing for service API keys.

A raw key looks like ``<service-name>_<token>`` so a leaked key can be traced
to its service by inspection. Only ``hash_api_key(raw_key, pepper)`` is ever
stored, together with a 10-character display prefix of the token.
"""

from __future__ import annotations

import hashlib
import secrets

TOKEN_BYTES = 32
PREFIX_LENGTH = 10


def generate_raw_api_key(service_name: str) -> tuple[str, str]:
    """Return (raw_key, key_prefix) for a normalized service name."""
    token = secrets.token_urlsafe(TOKEN_BYTES)
    return f"{service_name}_{token}", token[:PREFIX_LENGTH]


def hash_api_key(raw_key: str, pepper: str) -> str:
    """SHA-256 hex digest of ``pepper:raw_key``."""
    return hashlib.sha256(f"{pepper}:{raw_key}".encode("utf-8")).hexdigest()
