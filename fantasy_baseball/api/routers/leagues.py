"""League format routes (API key required)."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from fantasy_baseball.api.auth import require_api_key
from fantasy_baseball.api.deps import get_context
from fantasy_baseball.api.responses import paginated, success
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import NotFoundError, ValidationError
from fantasy_baseball.leagues.models import LeagueFilters, LeagueInput
from fantasy_baseball.sanitize import sanitize_object

router = APIRouter(
    prefix="/api/leagues",
    tags=["leagues"],
    dependencies=[Depends(require_api_key)],
)


@router.get("")
def api_list_leagues(
    filters: Annotated[LeagueFilters, Query()],
    ctx: AppContext = Depends(get_context),
):
    leagues, pagination = ctx.leagues.list_leagues(filters)
    return paginated(leagues, pagination)


@router.post("", status_code=201)
def api_upsert_league(
    body: Any = Body(...),
    ctx: AppContext = Depends(get_context),
):
    """Create or replace a league format, keyed by externalId."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    league = LeagueInput.model_validate(sanitize_object(body))
    return success(ctx.leagues.upsert_league(league))


@router.get("/{league_id}")
def api_get_league(league_id: str, ctx: AppContext = Depends(get_context)):
    league = ctx.leagues.get_league(league_id)
    if league is None:
        raise NotFoundError("League not found")
    return success(league)
