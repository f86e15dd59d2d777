"""
Application context — everything one process needs, built once at startup.

The web app, the scheduler and the CLI all receive the same AppContext
instead of reaching for module-level singletons.

Usage:
    ctx = build_context(load_config())
    app = create_app(ctx)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_baseball.api_keys.dal import ApiKeyRepository
from fantasy_baseball.api_keys.service import ApiKeysService
from fantasy_baseball.config import Config
from fantasy_baseball.db.connection import Database
from fantasy_baseball.leagues.dal import LeaguesRepository
from fantasy_baseball.players.dal import PlayersRepository

if TYPE_CHECKING:
    from fantasy_baseball.jobs.scheduler import PlayerSyncScheduler


@dataclass
class AppContext:
    config: Config
    db: Database
    api_keys: ApiKeysService
    players: PlayersRepository
    leagues: LeaguesRepository
    scheduler: PlayerSyncScheduler | None = None

    def close(self) -> None:
        if self.scheduler is not None:
            self.scheduler.shutdown()
        self.db.close()


def build_context(config: Config) -> AppContext:
    """Wire repositories and services to one Database. Opens no connections."""
    db = Database(config.db)
    return AppContext(
        config=config,
        db=db,
        api_keys=ApiKeysService(ApiKeyRepository(db), pepper=config.auth.pepper),
        players=PlayersRepository(db),
        leagues=LeaguesRepository(db),
    )
