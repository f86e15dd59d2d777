"""
Request authentication gate for service API keys.

Attach as a router dependency; every route beneath it then requires a valid,
active ``x-api-key``. The gate is stateless and looks the key up on every
request, so a status change or rotation takes effect immediately.
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from fantasy_baseball.api.deps import get_context
from fantasy_baseball.api_keys.models import ApiKeyClient
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import UnauthorizedError


def require_api_key(
    request: Request,
    x_api_key: str | None = Header(default=None),
    ctx: AppContext = Depends(get_context),
) -> ApiKeyClient | None:
    """Authenticate the caller and set ``request.state.api_client``.

    Raises:
        UnauthorizedError: header missing or key unknown.
        ForbiddenError: key belongs to an inactive service.
    """
    if ctx.config.auth.disabled:
        return None

    if not x_api_key or not x_api_key.strip():
        raise UnauthorizedError("Missing API key")

    client = ctx.api_keys.authenticate_api_key(x_api_key)
    request.state.api_client = client
    return client
