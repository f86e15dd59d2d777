"""
Default league formats.

Seeding is idempotent (upsert by externalId) and never fatal: a failure is
logged and the caller carries on with whatever leagues already exist.
"""

from __future__ import annotations

import logging

from fantasy_baseball.leagues.dal import LeaguesRepository
from fantasy_baseball.leagues.models import LeagueInput, RosterSlots

logger = logging.getLogger(__name__)

_STANDARD_BATTING = ["R", "HR", "RBI", "SB", "AVG"]
_STANDARD_PITCHING = ["W", "SV", "K", "ERA", "WHIP"]

DEFAULT_LEAGUES: list[LeagueInput] = [
    LeagueInput(
        externalId="standard-5x5-roto-auction",
        name="Standard 5x5 Roto (Auction)",
        description="Classic 5x5 rotisserie scoring with a $260 auction draft.",
        format="roto",
        draftType="auction",
        battingCategories=_STANDARD_BATTING,
        pitchingCategories=_STANDARD_PITCHING,
        rosterSlots=RosterSlots(C=2, OF=5, UTIL=1, SP=5, RP=3, BENCH=4),
        totalBudget=260,
        isDefault=True,
    ),
    LeagueInput(
        externalId="standard-5x5-roto-snake",
        name="Standard 5x5 Roto (Snake)",
        description="Classic 5x5 rotisserie scoring with a snake draft.",
        format="roto",
        draftType="snake",
        battingCategories=_STANDARD_BATTING,
        pitchingCategories=_STANDARD_PITCHING,
        rosterSlots=RosterSlots(C=1, OF=3, UTIL=1, SP=5, RP=2, BENCH=5),
        isDefault=True,
    ),
    LeagueInput(
        externalId="obp-league-auction",
        name="OBP League (Auction)",
        description="5x5 rotisserie with on-base percentage in place of batting average.",
        format="roto",
        draftType="auction",
        battingCategories=["R", "HR", "RBI", "SB", "OBP"],
        pitchingCategories=_STANDARD_PITCHING,
        rosterSlots=RosterSlots(C=2, OF=5, UTIL=1, SP=5, RP=3, BENCH=4),
        totalBudget=260,
        isDefault=True,
    ),
    LeagueInput(
        externalId="6x6-roto-qs-auction",
        name="6x6 Roto with QS (Auction)",
        description="6x6 rotisserie adding OPS and quality starts.",
        format="roto",
        draftType="auction",
        battingCategories=["R", "HR", "RBI", "SB", "AVG", "OPS"],
        pitchingCategories=["W", "SV", "K", "ERA", "WHIP", "QS"],
        rosterSlots=RosterSlots(C=2, OF=5, UTIL=1, SP=6, RP=3, BENCH=4),
        totalBudget=260,
        isDefault=True,
    ),
    LeagueInput(
        externalId="deep-league-auction",
        name="Deep League (Auction)",
        description="AL- or NL-only style deep roster with a large bench.",
        format="roto",
        draftType="auction",
        battingCategories=_STANDARD_BATTING,
        pitchingCategories=_STANDARD_PITCHING,
        rosterSlots=RosterSlots(C=2, OF=5, DH=1, UTIL=1, SP=6, RP=3, BENCH=7),
        totalBudget=260,
        isDefault=True,
    ),
    LeagueInput(
        externalId="h2h-categories-snake",
        name="H2H Categories (Snake)",
        description="Weekly head-to-head matchups across 6x6 categories.",
        format="h2h-category",
        draftType="snake",
        battingCategories=["R", "HR", "RBI", "SB", "AVG", "OPS"],
        pitchingCategories=["W", "SV+HLD", "K", "ERA", "WHIP", "QS"],
        rosterSlots=RosterSlots(C=1, OF=3, UTIL=2, SP=5, RP=3, BENCH=5),
        isDefault=True,
    ),
]


def seed_default_leagues(repository: LeaguesRepository) -> int:
    """Upsert the default formats. Returns how many were seeded (0 on failure)."""
    logger.info("Seeding default leagues...")
    try:
        changed = repository.upsert_leagues(DEFAULT_LEAGUES)
    except Exception:
        logger.exception("Failed to seed default leagues")
        return 0
    logger.info("Seeded %d default leagues", len(DEFAULT_LEAGUES))
    logger.debug("%d default leagues inserted or changed", changed)
    return len(DEFAULT_LEAGUES)
