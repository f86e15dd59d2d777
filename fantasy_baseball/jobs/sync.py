"""
Roster sync: MLB Stats API people -> players table.

Each person is mapped to a hitter or pitcher input keyed by ``mlb-<id>``.
People whose position or club cannot be mapped are skipped, not failed.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING, Any

import pydantic

from fantasy_baseball.jobs.mlb_client import MlbStatsClient
from fantasy_baseball.players.models import HitterInput, PitcherInput

if TYPE_CHECKING:
    from fantasy_baseball.context import AppContext

logger = logging.getLogger(__name__)

# MLB primaryPosition.abbreviation -> fantasy position
POSITION_MAP = {
    "C": "C",
    "1B": "1B",
    "2B": "2B",
    "3B": "3B",
    "SS": "SS",
    "LF": "OF",
    "CF": "OF",
    "RF": "OF",
    "OF": "OF",
    "DH": "DH",
    "P": "SP",
    "SP": "SP",
    "RP": "RP",
}
TWO_WAY = "TWP"

LEAGUE_IDS = {103: "AL", 104: "NL"}

_TEAM_ABBR_RE = re.compile(r"^[A-Z]{2,3}$")


def build_team_index(teams: list[dict[str, Any]]) -> dict[int, tuple[str, str]]:
    """Map team id -> (abbreviation, AL|NL). Teams outside the two leagues are dropped."""
    index: dict[int, tuple[str, str]] = {}
    for team in teams:
        league = LEAGUE_IDS.get((team.get("league") or {}).get("id"))
        abbr = (team.get("abbreviation") or "").upper()
        if league and _TEAM_ABBR_RE.match(abbr):
            index[team["id"]] = (abbr, league)
    return index


def map_mlb_player(
    person: dict[str, Any],
    teams: dict[int, tuple[str, str]],
) -> HitterInput | PitcherInput | None:
    """Map one MLB person to a player input, or None if it cannot be placed."""
    team_id = (person.get("currentTeam") or {}).get("id")
    if team_id not in teams:
        return None
    team, league = teams[team_id]

    code = (person.get("primaryPosition") or {}).get("abbreviation", "")
    if code == TWO_WAY:
        positions, player_type = ["DH", "SP"], "pitcher"
    elif code in POSITION_MAP:
        position = POSITION_MAP[code]
        positions = [position]
        player_type = "pitcher" if position in ("SP", "RP") else "hitter"
    else:
        return None

    common: dict[str, Any] = {
        "externalId": f"mlb-{person['id']}",
        "name": person.get("fullName", ""),
        "team": team,
        "positions": positions,
        "league": league,
        "jerseyNumber": person.get("primaryNumber"),
        "birthDate": person.get("birthDate"),
        "age": person.get("currentAge"),
        "height": person.get("height"),
        "weight": person.get("weight"),
        "mlbDebutDate": person.get("mlbDebutDate"),
        "active": person.get("active", True),
    }

    try:
        if player_type == "pitcher":
            hand = (person.get("pitchHand") or {}).get("code")
            return PitcherInput(**common, pitchHand=hand if hand in ("R", "L") else None)
        side = (person.get("batSide") or {}).get("code")
        return HitterInput(**common, batSide=side if side in ("R", "L", "S") else None)
    except pydantic.ValidationError as e:
        logger.debug("Skipping MLB person %s: %s", person.get("id"), e)
        return None


async def sync_players(ctx: AppContext, client: MlbStatsClient | None = None) -> int:
    """Fetch the season roster and upsert it. Returns inserted plus changed players."""
    cfg = ctx.config.sync
    own_client = client is None
    client = client or MlbStatsClient(cfg.mlb_api_url, timeout=cfg.timeout_seconds)

    try:
        logger.info("Running player sync for season %s...", cfg.season)
        teams = build_team_index(await client.get_teams(cfg.season))
        people = await client.get_players(cfg.season)
    finally:
        if own_client:
            await client.close()

    mapped = [p for p in (map_mlb_player(person, teams) for person in people) if p is not None]
    skipped = len(people) - len(mapped)

    count = await asyncio.to_thread(ctx.players.upsert_players, mapped)
    logger.info(
        "Synced %d players (%d mapped, %d skipped, %d unchanged)",
        count,
        len(mapped),
        skipped,
        len(mapped) - count,
    )
    return count
