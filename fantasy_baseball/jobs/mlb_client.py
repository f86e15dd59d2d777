"""
Async client for the public MLB Stats API.

Only the two endpoints the roster sync needs: the team list (for abbreviations
and AL/NL membership) and the season player list.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

MLB_SPORT_ID = 1


class MlbStatsClient:
    """Thin wrapper over httpx.AsyncClient. Pass ``http`` to share or mock a client."""

    def __init__(
        self,
        base_url: str = "https://statsapi.mlb.com",
        http: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> MlbStatsClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        resp = await self._client.get(f"{self.base_url}{path}", params=params)
        resp.raise_for_status()
        return dict(resp.json())

    async def get_teams(self, season: int) -> list[dict[str, Any]]:
        """GET /api/v1/teams — MLB clubs for a season."""
        data = await self._get("/api/v1/teams", {"sportId": MLB_SPORT_ID, "season": season})
        teams = data.get("teams", [])
        logger.debug("Fetched %d MLB teams for %s", len(teams), season)
        return teams

    async def get_players(self, season: int) -> list[dict[str, Any]]:
        """GET /api/v1/sports/1/players — every rostered person for a season."""
        data = await self._get(f"/api/v1/sports/{MLB_SPORT_ID}/players", {"season": season})
        people = data.get("people", [])
        logger.debug("Fetched %d MLB players for %s", len(people), season)
        return people
