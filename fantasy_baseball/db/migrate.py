"""
Schema migrations for the fantasy baseball database.

Each ``fantasy_baseball/migrations/NNN_<name>.sql`` file runs once, in version
order, inside its own transaction. Applied versions are recorded in
``schema_migrations`` together with a SHA-256 of the file, so an edited file
shows up as DRIFT in ``fantasy-baseball migrate status``.
"""

from __future__ import annotations

import hashlib
import logging
import re
from pathlib import Path
from typing import NamedTuple

from psycopg2.extras import RealDictCursor

from fantasy_baseball.db.connection import Database

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"

_FILENAME_RE = re.compile(r"^(\d+[a-z]?)_.+\.sql$")

_CREATE_LEDGER = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version     TEXT PRIMARY KEY,
        filename    TEXT NOT NULL,
        applied_at  TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        checksum    TEXT
    )
"""


class Migration(NamedTuple):
    version: str
    path: Path

    @property
    def checksum(self) -> str:
        return checksum(self.path)


def checksum(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def discover(migrations_dir: Path | None = None) -> list[Migration]:
    """Migration files in version order. Names not shaped ``NNN_name.sql`` are ignored."""
    found = []
    for path in sorted((migrations_dir or MIGRATIONS_DIR).glob("*.sql")):
        match = _FILENAME_RE.match(path.name)
        if match:
            found.append(Migration(match.group(1), path))
    return found


def _recorded(conn) -> dict[str, dict]:
    """Create the ledger if needed and return its rows keyed by version."""
    with conn.cursor() as cur:
        cur.execute(_CREATE_LEDGER)
    conn.commit()
    with conn.cursor(cursor_factory=RealDictCursor) as cur:
        cur.execute("SELECT version, filename, applied_at, checksum FROM schema_migrations")
        return {row["version"]: dict(row) for row in cur.fetchall()}


def status(db: Database, migrations_dir: Path | None = None) -> list[dict]:
    """One row per migration file: version, filename, status, applied_at.

    status is ``applied``, ``pending`` or ``DRIFT`` (applied, but the file
    has changed since).
    """
    with db.connection() as conn:
        recorded = _recorded(conn)

    rows = []
    for migration in discover(migrations_dir):
        entry = recorded.get(migration.version)
        if entry is None:
            state, applied_at = "pending", None
        else:
            drifted = entry["checksum"] and entry["checksum"] != migration.checksum
            state, applied_at = ("DRIFT" if drifted else "applied"), entry["applied_at"]
        rows.append({
            "version": migration.version,
            "filename": migration.path.name,
            "status": state,
            "applied_at": applied_at,
        })
    return rows


def apply(
    db: Database,
    version: str | None = None,
    dry_run: bool = False,
    migrations_dir: Path | None = None,
) -> list[str]:
    """Run pending migrations (or only ``version``). Returns the versions run.

    With ``dry_run`` nothing is executed; the versions that would run are returned.
    """
    with db.connection() as conn:
        recorded = _recorded(conn)
        pending = [
            m
            for m in discover(migrations_dir)
            if m.version not in recorded and version in (None, m.version)
        ]
        if not pending:
            logger.info("Schema is up to date")
            return []
        if dry_run:
            for m in pending:
                logger.info("Pending migration %s", m.path.name)
            return [m.version for m in pending]

        done = []
        for m in pending:
            try:
                with conn.cursor() as cur:
                    cur.execute(m.path.read_text())
                    cur.execute(
                        "INSERT INTO schema_migrations (version, filename, checksum) "
                        "VALUES (%s, %s, %s)",
                        (m.version, m.path.name, m.checksum),
                    )
                conn.commit()
            except Exception:
                conn.rollback()
                logger.error("Migration %s failed, rolled back", m.path.name)
                raise
            logger.info("Applied migration %s", m.path.name)
            done.append(m.version)
        return done
