"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from fantasy_baseball.api_keys.models import ApiKeyClient
from fantasy_baseball.context import AppContext


def get_context(request: Request) -> AppContext:
    """The AppContext the app was created with."""
    return request.app.state.ctx


def get_api_client(request: Request) -> ApiKeyClient | None:
    """Identity attached by the auth gate. None when auth is disabled."""
    return getattr(request.state, "api_client", None)
