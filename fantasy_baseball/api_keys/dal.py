"""
API key data access layer — PostgreSQL CRUD on service_api_keys.

Uniqueness of service_name and key_hash is enforced by table constraints;
a violation surfaces as ConflictError. Every mutation is a single statement.

Usage:
    repo = ApiKeyRepository(db)
    row = repo.find_by_hash(key_hash)
"""

from __future__ import annotations

import logging
import uuid

from psycopg2.errors import UniqueViolation
from psycopg2.extras import RealDictCursor

from fantasy_baseball.db.connection import Database, is_uuid
from fantasy_baseball.errors import ConflictError

logger = logging.getLogger(__name__)

_COLUMNS = "id, service_name, key_hash, key_prefix, status, created_at, updated_at"

KEY_HASH_CONSTRAINT = "service_api_keys_key_hash_key"


class ApiKeyRepository:
    """Row-level access to service credentials. Returns plain dicts."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def insert(self, service_name: str, key_hash: str, key_prefix: str) -> dict:
        """Insert an active record. Raises ConflictError on a duplicate name or hash."""
        key_id = str(uuid.uuid4())
        try:
            with self.db.connection() as conn:
                cur = conn.cursor(cursor_factory=RealDictCursor)
                cur.execute(
                    f"""
                    INSERT INTO service_api_keys (id, service_name, key_hash, key_prefix, status)
                    VALUES (%s, %s, %s, %s, 'active')
                    RETURNING {_COLUMNS}
                """,
                    (key_id, service_name, key_hash, key_prefix),
                )
                return dict(cur.fetchone())
        except UniqueViolation as e:
            if getattr(e.diag, "constraint_name", None) == KEY_HASH_CONSTRAINT:
                logger.error("Key hash collision while creating key for %s", service_name)
                raise ConflictError("Generated API key collided with an existing key") from e
            raise ConflictError(f"API key already exists for service: {service_name}") from e

    def find_by_id(self, key_id: str) -> dict | None:
        if not is_uuid(key_id):
            return None
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(f"SELECT {_COLUMNS} FROM service_api_keys WHERE id = %s", (key_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def find_by_name(self, service_name: str) -> dict | None:
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(
                f"SELECT {_COLUMNS} FROM service_api_keys WHERE service_name = %s",
                (service_name,),
            )
            row = cur.fetchone()
            return dict(row) if row else None

    def find_by_hash(self, key_hash: str) -> dict | None:
        """Authentication lookup: one indexed read, identity columns only."""
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(
                "SELECT id, service_name, status FROM service_api_keys WHERE key_hash = %s",
                (key_hash,),
            )
            row = cur.fetchone()
            return dict(row) if row else None

    def update_key(self, service_name: str, key_hash: str, key_prefix: str) -> dict | None:
        """Replace hash and prefix together. Returns None if the service is absent."""
        try:
            with self.db.connection() as conn:
                cur = conn.cursor(cursor_factory=RealDictCursor)
                cur.execute(
                    f"""
                    UPDATE service_api_keys
                    SET key_hash = %s, key_prefix = %s, updated_at = NOW()
                    WHERE service_name = %s
                    RETURNING {_COLUMNS}
                """,
                    (key_hash, key_prefix, service_name),
                )
                row = cur.fetchone()
                return dict(row) if row else None
        except UniqueViolation as e:
            logger.error("Key hash collision while rotating key for %s", service_name)
            raise ConflictError("Generated API key collided with an existing key") from e

    def update_status(self, service_name: str, status: str) -> dict | None:
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(
                f"""
                UPDATE service_api_keys
                SET status = %s, updated_at = NOW()
                WHERE service_name = %s
                RETURNING {_COLUMNS}
            """,
                (status, service_name),
            )
            row = cur.fetchone()
            return dict(row) if row else None

    def delete(self, service_name: str) -> bool:
        """Hard-delete a record. Returns True if a row was removed."""
        with self.db.connection() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM service_api_keys WHERE service_name = %s", (service_name,))
            return cur.rowcount > 0
