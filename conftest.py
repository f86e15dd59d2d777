"""
Root-level shared test fixtures.

Inherited by the unit and integration suites under tests/.
"""

from __future__ import annotations

import uuid

import pytest


@pytest.fixture
def test_prefix():
    """Unique prefix for test isolation."""
    return f"test-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove env vars that leak between tests and pin FANTASY_ENV=test."""
    for key in [
        "API_KEY_PEPPER",
        "DISABLE_API_KEY_AUTH",
        "FANTASY_DB_HOST",
        "FANTASY_DB_PORT",
        "FANTASY_DB_NAME",
        "FANTASY_DB_USER",
        "FANTASY_DB_PASSWORD",
        "PLAYER_SYNC_ENABLED",
        "PLAYER_SYNC_CRON",
        "PLAYER_SYNC_SEASON",
    ]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FANTASY_ENV", "test")
