"""Background job triggers (API key required)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fantasy_baseball.api.auth import require_api_key
from fantasy_baseball.api.deps import get_context
from fantasy_baseball.api.responses import success
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import ApiError

router = APIRouter(
    prefix="/api/jobs",
    tags=["jobs"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/sync-players", status_code=202)
def api_trigger_player_sync(ctx: AppContext = Depends(get_context)):
    if ctx.scheduler is None or not ctx.scheduler.running:
        raise ApiError("Player sync scheduler is not running", status_code=503)
    ctx.scheduler.trigger_now()
    return success({"job": "sync-players"}, message="Player sync queued")
