"""
Shared fixtures for the unit test suite.

Provides an in-memory API key repository, an AppContext wired to it (other
repositories mocked), and an async client over the FastAPI app.
"""

from __future__ import annotations

import threading
import uuid
from datetime import UTC, datetime
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport

from fantasy_baseball.api.app import create_app
from fantasy_baseball.api_keys.service import ApiKeysService
from fantasy_baseball.config import TEST_PEPPER, AuthConfig, Config
from fantasy_baseball.context import AppContext
from fantasy_baseball.db.connection import Database, is_uuid
from fantasy_baseball.errors import ConflictError
from fantasy_baseball.leagues.dal import LeaguesRepository
from fantasy_baseball.players.dal import PlayersRepository


class FakeApiKeyRepository:
    """Dict-backed stand-in for ApiKeyRepository with the same uniqueness rules."""

    def __init__(self) -> None:
        self.rows: dict[str, dict] = {}
        self.hash_lookups = 0
        self._lock = threading.Lock()

    def _now(self) -> datetime:
        return datetime.now(UTC)

    def insert(self, service_name, key_hash, key_prefix):
        with self._lock:
            if service_name in self.rows:
                raise ConflictError(f"API key already exists for service: {service_name}")
            if any(r["key_hash"] == key_hash for r in self.rows.values()):
                raise ConflictError("Generated API key collided with an existing key")
            now = self._now()
            row = {
                "id": str(uuid.uuid4()),
                "service_name": service_name,
                "key_hash": key_hash,
                "key_prefix": key_prefix,
                "status": "active",
                "created_at": now,
                "updated_at": now,
            }
            self.rows[service_name] = row
            return dict(row)

    def find_by_id(self, key_id):
        if not is_uuid(key_id):
            return None
        for row in self.rows.values():
            if row["id"] == key_id:
                return dict(row)
        return None

    def find_by_name(self, service_name):
        row = self.rows.get(service_name)
        return dict(row) if row else None

    def find_by_hash(self, key_hash):
        self.hash_lookups += 1
        for row in self.rows.values():
            if row["key_hash"] == key_hash:
                return {"id": row["id"], "service_name": row["service_name"], "status": row["status"]}
        return None

    def update_key(self, service_name, key_hash, key_prefix):
        with self._lock:
            row = self.rows.get(service_name)
            if row is None:
                return None
            row.update(key_hash=key_hash, key_prefix=key_prefix, updated_at=self._now())
            return dict(row)

    def update_status(self, service_name, status):
        with self._lock:
            row = self.rows.get(service_name)
            if row is None:
                return None
            row.update(status=status, updated_at=self._now())
            return dict(row)

    def delete(self, service_name):
        with self._lock:
            return self.rows.pop(service_name, None) is not None


@pytest.fixture
def fake_repo():
    return FakeApiKeyRepository()


@pytest.fixture
def api_keys_service(fake_repo):
    return ApiKeysService(fake_repo, pepper=TEST_PEPPER)


@pytest.fixture
def config():
    return Config(environment="test")


@pytest.fixture
def ctx(config, api_keys_service):
    """AppContext with real key handling and mocked player/league storage."""
    return AppContext(
        config=config,
        db=MagicMock(spec=Database),
        api_keys=api_keys_service,
        players=MagicMock(spec=PlayersRepository),
        leagues=MagicMock(spec=LeaguesRepository),
    )


@pytest.fixture
def open_ctx(ctx):
    """Same context with authentication switched off."""
    ctx.config = Config(environment="test", auth=AuthConfig(disabled=True))
    return ctx


@pytest.fixture
def app(ctx):
    return create_app(ctx, run_scheduler=False)


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client wrapping the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def api_key(api_keys_service):
    """Raw key for an active 'draft-kit' service."""
    raw_key, _ = api_keys_service.create_service_key("draft-kit")
    return raw_key


@pytest.fixture
def mock_db():
    """Database stand-in whose connection() yields a mock conn/cursor pair."""
    mock_conn = MagicMock()
    mock_cursor = MagicMock()
    mock_conn.cursor.return_value = mock_cursor
    mock_cursor.__enter__.return_value = mock_cursor
    mock_cursor.fetchone.return_value = None
    mock_cursor.fetchall.return_value = []

    db = MagicMock(spec=Database)
    db.connection.return_value.__enter__.return_value = mock_conn
    db.connection.return_value.__exit__.return_value = False
    return {"db": db, "conn": mock_conn, "cursor": mock_cursor}
