"""
Data access layer for the players table.

Writes are keyed by ``external_id`` (the MLB person id with an ``mlb-`` prefix)
so repeated syncs reconcile instead of duplicating. Reads return camelCase
dicts ready for the API envelope.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

import psycopg2.extras
from psycopg2.errors import UniqueViolation
from psycopg2.extras import Json, RealDictCursor

from fantasy_baseball.db.connection import Database, is_uuid
from fantasy_baseball.errors import ConflictError
from fantasy_baseball.players.models import (
    COLUMN_MAP,
    HitterInput,
    PitcherInput,
    PlayerFilters,
    player_to_dict,
    player_to_row,
)

logger = logging.getLogger(__name__)

_DATA_COLUMNS = list(COLUMN_MAP.values())
_UPDATABLE = [c for c in _DATA_COLUMNS if c != "external_id"]

_INSERT_COLUMNS = ", ".join(["id", *_DATA_COLUMNS])
_PLACEHOLDERS = ", ".join(["%s"] * (len(_DATA_COLUMNS) + 1))
_SET_CLAUSE = ", ".join(f"{c} = EXCLUDED.{c}" for c in _UPDATABLE)
_CHANGED_CLAUSE = "({}) IS DISTINCT FROM ({})".format(
    ", ".join(f"players.{c}" for c in _UPDATABLE),
    ", ".join(f"EXCLUDED.{c}" for c in _UPDATABLE),
)

AnyPlayerInput = HitterInput | PitcherInput


def _values(player: AnyPlayerInput) -> tuple:
    row = player_to_row(player)
    row["stats"] = Json(row["stats"])
    return (str(uuid.uuid4()), *(row[c] for c in _DATA_COLUMNS))


def _dedupe(players: Iterable[AnyPlayerInput]) -> list[AnyPlayerInput]:
    """Keep the last input per externalId; one statement cannot touch a row twice."""
    by_id: dict[str, AnyPlayerInput] = {}
    for p in players:
        by_id[p.externalId] = p
    return list(by_id.values())


class PlayersRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    # ─── Reads ───────────────────────────────────────────────────────────

    def list_players(self, filters: PlayerFilters | None = None) -> tuple[list[dict], dict]:
        """Filtered, name-sorted page of players plus {page, limit, total}."""
        filters = filters or PlayerFilters()
        clauses: list[str] = []
        params: list = []

        if filters.league and filters.league != "MLB":
            clauses.append("league = %s")
            params.append(filters.league)
        if filters.position:
            clauses.append("%s = ANY(positions)")
            params.append(filters.position)
        if filters.playerType:
            clauses.append("player_type = %s")
            params.append(filters.playerType)
        if filters.search and filters.search.strip():
            clauses.append("to_tsvector('simple', name) @@ plainto_tsquery('simple', %s)")
            params.append(filters.search.strip())

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        offset = (filters.page - 1) * filters.limit

        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(f"SELECT COUNT(*) AS total FROM players {where}", params)
            total = cur.fetchone()["total"]
            cur.execute(
                f"SELECT * FROM players {where} ORDER BY name ASC, id ASC LIMIT %s OFFSET %s",
                [*params, filters.limit, offset],
            )
            rows = cur.fetchall()

        pagination = {"page": filters.page, "limit": filters.limit, "total": total}
        return [player_to_dict(r) for r in rows], pagination

    def get_player(self, player_id: str) -> dict | None:
        if not is_uuid(player_id):
            return None
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute("SELECT * FROM players WHERE id = %s", (player_id,))
            row = cur.fetchone()
        return player_to_dict(row) if row else None

    # ─── Writes ──────────────────────────────────────────────────────────

    def create_player(self, player: AnyPlayerInput) -> dict:
        try:
            with self.db.connection() as conn:
                cur = conn.cursor(cursor_factory=RealDictCursor)
                cur.execute(
                    f"INSERT INTO players ({_INSERT_COLUMNS}) VALUES ({_PLACEHOLDERS}) RETURNING *",
                    _values(player),
                )
                row = cur.fetchone()
        except UniqueViolation as e:
            raise ConflictError(f"Player already exists: {player.externalId}") from e
        return player_to_dict(row)

    def upsert_player(self, player: AnyPlayerInput) -> dict:
        with self.db.connection() as conn:
            cur = conn.cursor(cursor_factory=RealDictCursor)
            cur.execute(
                f"""
                INSERT INTO players ({_INSERT_COLUMNS}) VALUES ({_PLACEHOLDERS})
                ON CONFLICT (external_id) DO UPDATE
                SET {_SET_CLAUSE}, updated_at = NOW()
                RETURNING *
            """,
                _values(player),
            )
            row = cur.fetchone()
        return player_to_dict(row)

    def upsert_players(self, players: Iterable[AnyPlayerInput]) -> int:
        """Bulk upsert by externalId. Returns inserted plus actually-changed rows."""
        batch = _dedupe(players)
        if not batch:
            return 0
        with self.db.connection() as conn:
            with conn.cursor() as cur:
                returned = psycopg2.extras.execute_values(
                    cur,
                    f"""INSERT INTO players ({_INSERT_COLUMNS})
                        VALUES %s
                        ON CONFLICT (external_id) DO UPDATE
                        SET {_SET_CLAUSE}, updated_at = NOW()
                        WHERE {_CHANGED_CLAUSE}
                        RETURNING id""",
                    [_values(p) for p in batch],
                    fetch=True,
                )
        logger.debug("Upserted %d of %d players", len(returned), len(batch))
        return len(returned)

    def insert_players(self, players: Iterable[AnyPlayerInput]) -> int:
        batch = list(players)
        if not batch:
            return 0
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    psycopg2.extras.execute_values(
                        cur,
                        f"INSERT INTO players ({_INSERT_COLUMNS}) VALUES %s",
                        [_values(p) for p in batch],
                    )
        except UniqueViolation as e:
            raise ConflictError("One or more players already exist") from e
        return len(batch)

    def clear_players(self) -> int:
        with self.db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM players")
                return cur.rowcount
