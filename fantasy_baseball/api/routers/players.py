"""Player read routes (API key required)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from fantasy_baseball.api.auth import require_api_key
from fantasy_baseball.api.deps import get_context
from fantasy_baseball.api.responses import paginated, success
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import NotFoundError
from fantasy_baseball.players.models import PlayerFilters

router = APIRouter(
    prefix="/api/players",
    tags=["players"],
    dependencies=[Depends(require_api_key)],
)


@router.get("")
def api_list_players(
    filters: Annotated[PlayerFilters, Query()],
    ctx: AppContext = Depends(get_context),
):
    """List players. ``league=MLB`` means both leagues."""
    players, pagination = ctx.players.list_players(filters)
    return paginated(players, pagination)


@router.get("/{player_id}")
def api_get_player(player_id: str, ctx: AppContext = Depends(get_context)):
    player = ctx.players.get_player(player_id)
    if player is None:
        raise NotFoundError("Player not found")
    return success(player)
