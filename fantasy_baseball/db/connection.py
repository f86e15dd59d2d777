"""
Connection pooling for PostgreSQL.

One ``Database`` is created per process (see ``fantasy_baseball.context``) and
handed to every repository. Uses a psycopg2 ThreadedConnectionPool so the
FastAPI worker threads can share it.

Usage:
    db = Database(config.db)

    with db.connection() as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")

    db.close()
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Generator
from contextlib import contextmanager

import psycopg2
import psycopg2.pool

from fantasy_baseball.config import DatabaseConfig

logger = logging.getLogger(__name__)


class Database:
    """Lazily opened connection pool bound to one DatabaseConfig."""

    def __init__(self, config: DatabaseConfig, minconn: int = 1, maxconn: int = 20) -> None:
        self.config = config
        self.minconn = minconn
        self.maxconn = maxconn
        self._pool: psycopg2.pool.ThreadedConnectionPool | None = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._pool is not None and not self._pool.closed

    def open(self) -> psycopg2.pool.ThreadedConnectionPool:
        """Create the pool if needed and return it."""
        if self.is_open:
            return self._pool  # type: ignore[return-value]

        with self._lock:
            if self.is_open:
                return self._pool  # type: ignore[return-value]

            cfg = self.config
            logger.info(
                "Creating connection pool: %s@%s:%s/%s (min=%d, max=%d)",
                cfg.user,
                cfg.host,
                cfg.port,
                cfg.name,
                self.minconn,
                self.maxconn,
            )
            try:
                self._pool = psycopg2.pool.ThreadedConnectionPool(
                    minconn=self.minconn,
                    maxconn=self.maxconn,
                    **cfg.dict,
                )
            except psycopg2.OperationalError as e:
                raise ConnectionError(
                    f"Cannot connect to PostgreSQL at {cfg.host}:{cfg.port}/{cfg.name}: {e}\n"
                    f"Check FANTASY_DB_* environment variables and ensure PostgreSQL is running."
                ) from e
            return self._pool

    @contextmanager
    def connection(
        self,
        autocommit: bool = False,
    ) -> Generator[psycopg2.extensions.connection, None, None]:
        """Borrow a connection from the pool.

        Commits on success, rolls back when the block raises, and always
        returns the connection to the pool.
        """
        pool = self.open()
        conn = pool.getconn()
        try:
            if autocommit:
                conn.autocommit = True
            yield conn
            if not autocommit:
                conn.commit()
        except Exception:
            if not autocommit:
                conn.rollback()
            raise
        finally:
            if autocommit:
                conn.autocommit = False
            pool.putconn(conn)

    def ping(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            with self.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1")
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", e)
            return False

    def close(self) -> None:
        """Close all pooled connections. Safe to call more than once."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Connection pool closed")


def is_uuid(value: object) -> bool:
    """True if ``value`` parses as a UUID. Lets callers skip lookups that cannot match."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
