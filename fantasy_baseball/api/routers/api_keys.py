"""Caller self-inspection route (API key required)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fantasy_baseball.api.auth import require_api_key
from fantasy_baseball.api.deps import get_api_client, get_context
from fantasy_baseball.api.responses import success
from fantasy_baseball.api_keys.models import ApiKeyClient
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import UnauthorizedError

router = APIRouter(
    prefix="/api/api-keys",
    tags=["api-keys"],
    dependencies=[Depends(require_api_key)],
)


@router.get("/me")
def api_me(
    client: ApiKeyClient | None = Depends(get_api_client),
    ctx: AppContext = Depends(get_context),
):
    """Public view of the credential used for this request."""
    if client is None:
        raise UnauthorizedError("Missing API client context")
    record = ctx.api_keys.get_service_by_id(client.keyId)
    return success(record.model_dump(mode="json"))
