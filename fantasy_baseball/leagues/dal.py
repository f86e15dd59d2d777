"""
Data access layer for the leagues table.

League formats are keyed by ``external_id``; every write is an upsert.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

import psycopg2.extras
from psycopg2.extras import Json, RealDictCursor

from fantasy_baseball.db.connection import Database, is_uuid
from fantasy_baseball.leagues.models import LeagueFilters, LeagueInput, league_to_dict, league_to_row

logger = logging.getLogger(__name__)

_DATA_COLUMNS = [
    "external_id",
    "name",
    "description",
    "format",
    "draft_type",
    "batting_categories",
    "pitching_categories",
    "roster_slots",
    "total_budget",
    "is_default",
    "category_weights",
]
_UPDATABLE = [c for c in _DATA_COLUMNS if c != "external_id"]
_JSON_COLUMNS = {"roster_slots", "category_weights"}

_INSERT_COLUMNS = ", ".join(["id", *_DATA_COLUMNS])
_PLACEHOLDERS = ", ".join(["%s"] * (len(_DATA_COLUMNS) + 1))
_SET_CLAUSE = ", ".join(f"{c} = EXCLUDED.{c}" for c in _UPDATABLE)
_CHANGED_CLAUSE = "({}) IS DISTINCT FROM ({})".format(
    ", ".join(f"leagues.{c}" for c in _UPDATABLE),
    ", ".join(f"EXCLUDED.{c}" for c in _UPDATABLE),
)

_SEARCH_VECTOR = "to_tsvector('simple', name || ' ' || coalesce(description, ''))"


def _values(league: LeagueInput) -> tuple:
    row = league_to_row(league)
    for column in _JSON_COLUMNS:
        if row[column] is not None:
            row[column] = Json(row[column])
    return (str(uuid.uuid4()), *(row[c] for c in _DATA_COLUMNS))


class LeaguesRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    def list_leagues(self, filters: LeagueFilters | None = None) -> tuple[list[dict], dict]:
        """Filtered page of leagues, default formats first, then by name."""
        filters = filters or LeagueFilters()
        clauses: list[str] = []
        params: list = []

        if filters.format:
            clauses.append("format = %s")
            params.append(filters.format)
        if filters.draftType:
            clauses.append("draft_type = %s")
            params.append(filters.draftType)
        if filters.isDefault is not None:
            clauses.append("is_default = %s")
            params.append(filters.isDefault)
        if filters.search and filters.search.strip():
            clauses.append(f"{_SEARCH_VECTOR} @@ plainto_tsquery('simple', %s)")
            params.append(filters.search.strip())

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        offset = (filters.page - 1) * filters.limit

        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(f"SELECT COUNT(*) AS total FROM leagues {where}", params)
            total = cur.fetchone()["total"]
            cur.execute(
                f"""SELECT * FROM leagues {where}
                    ORDER BY is_default DESC, name ASC, id ASC
                    LIMIT %s OFFSET %s""",
                [*params, filters.limit, offset],
            )
            rows = cur.fetchall()

        pagination = {"page": filters.page, "limit": filters.limit, "total": total}
        return [league_to_dict(r) for r in rows], pagination

    def get_league(self, league_id: str) -> dict | None:
        if not is_uuid(league_id):
            return None
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute("SELECT * FROM leagues WHERE id = %s", (league_id,))
            row = cur.fetchone()
        return league_to_dict(row) if row else None

    def upsert_league(self, league: LeagueInput) -> dict:
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(
                f"""
                INSERT INTO leagues ({_INSERT_COLUMNS}) VALUES ({_PLACEHOLDERS})
                ON CONFLICT (external_id) DO UPDATE
                SET {_SET_CLAUSE}, updated_at = NOW()
                RETURNING *
            """,
                _values(league),
            )
            row = cur.fetchone()
        logger.info("Upserted league %s", league.externalId)
        return league_to_dict(row)

    def upsert_leagues(self, leagues: Iterable[LeagueInput]) -> int:
        """Bulk upsert by externalId. Returns inserted plus actually-changed rows."""
        by_id = {lg.externalId: lg for lg in leagues}
        if not by_id:
            return 0
        with self.db.connection() as conn:
            with conn.cursor() as cur:
                returned = psycopg2.extras.execute_values(
                    cur,
                    f"""INSERT INTO leagues ({_INSERT_COLUMNS})
                        VALUES %s
                        ON CONFLICT (external_id) DO UPDATE
                        SET {_SET_CLAUSE}, updated_at = NOW()
                        WHERE {_CHANGED_CLAUSE}
                        RETURNING id""",
                    [_values(lg) for lg in by_id.values()],
                    fetch=True,
                )
        return len(returned)

