"""
FastAPI application factory.

Usage:
    ctx = build_context(load_config())
    app = create_app(ctx)
    uvicorn.run(app, port=ctx.config.port)
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

import pydantic
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fantasy_baseball import __version__
from fantasy_baseball.api import responses
from fantasy_baseball.api.middleware import CorrelationMiddleware
from fantasy_baseball.api.routers import api_keys, health, jobs, leagues, players
from fantasy_baseball.context import AppContext
from fantasy_baseball.errors import ApiError
from fantasy_baseball.jobs.scheduler import PlayerSyncScheduler
from fantasy_baseball.leagues.seed import seed_default_leagues

logger = logging.getLogger(__name__)


def _validation_details(errors: list) -> list[dict]:
    return [
        {"path": ".".join(str(p) for p in e.get("loc", ())), "message": e.get("msg", "")}
        for e in errors
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"success": false, "message": ...}``."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return responses.error(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        response = responses.error(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return responses.error("Validation failed", 400, _validation_details(exc.errors()))

    @app.exception_handler(pydantic.ValidationError)
    async def handle_model_validation(request: Request, exc: pydantic.ValidationError):
        return responses.error("Validation failed", 400, _validation_details(exc.errors()))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return responses.error("Internal server error", 500)


def create_app(ctx: AppContext, run_scheduler: bool = True) -> FastAPI:
    """Build the app around an existing context.

    The lifespan seeds the default leagues and, when ``run_scheduler`` is set,
    starts the player sync scheduler. The context's pool is closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await asyncio.to_thread(seed_default_leagues, ctx.leagues)
        if run_scheduler:
            ctx.scheduler = ctx.scheduler or PlayerSyncScheduler(ctx)
            ctx.scheduler.start()
        logger.info("Fantasy baseball API ready (%s)", ctx.config.environment)
        yield
        ctx.close()

    app = FastAPI(
        title="Fantasy Baseball API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(players.router)
    app.include_router(leagues.router)
    app.include_router(api_keys.router)
    app.include_router(jobs.router)

    if ctx.config.auth.disabled:
        logger.warning("API key authentication is DISABLED")

    return app
