"""Database connection management."""

from fantasy_baseball.db.connection import Database, is_uuid

__all__ = ["Database", "is_uuid"]
