"""
Centralized configuration for the fantasy baseball API.

All configuration is loaded from environment variables with sensible defaults.
A ``.env`` file in the working directory is read first (real environment
variables always win).

Usage:
    from fantasy_baseball.config import load_config
    cfg = load_config()
    print(cfg.db.name)          # "fantasy_baseball"
    print(cfg.auth.pepper)      # value of API_KEY_PEPPER
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

from dotenv import load_dotenv

from fantasy_baseball.errors import ConfigError

TEST_PEPPER = "test-api-key-pepper"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DatabaseConfig:
    """PostgreSQL connection parameters."""

    host: str = "127.0.0.1"
    port: int = 5432
    name: str = "fantasy_baseball"
    user: str = "postgres"
    password: str = ""

    @property
    def dsn(self) -> str:
        """Return a psycopg2-compatible DSN string."""
        parts = [f"dbname={self.name}"]
        if self.host:
            parts.append(f"host={self.host}")
        parts.append(f"port={self.port}")
        if self.user:
            parts.append(f"user={self.user}")
        if self.password:
            parts.append(f"password={self.password}")
        return " ".join(parts)

    @property
    def dict(self) -> dict[str, str | int]:
        """Return a psycopg2.connect() kwargs dict."""
        d: dict[str, str | int] = {
            "dbname": self.name,
            "port": self.port,
        }
        if self.host:
            d["host"] = self.host
        if self.user:
            d["user"] = self.user
        if self.password:
            d["password"] = self.password
        return d


@dataclass(frozen=True)
class AuthConfig:
    """Service API key settings. The pepper is never persisted."""

    pepper: str = TEST_PEPPER
    disabled: bool = False


@dataclass(frozen=True)
class SyncConfig:
    """Scheduled roster sync against the MLB Stats API."""

    enabled: bool = True
    cron: str = "0 3 * * *"
    timezone: str = "UTC"
    season: int = field(default_factory=lambda: date.today().year)
    mlb_api_url: str = "https://statsapi.mlb.com"
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class Config:
    """Top-level configuration."""

    environment: str = "development"
    port: int = 3001
    log_level: str = "INFO"

    db: DatabaseConfig = field(default_factory=DatabaseConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUE_VALUES


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from environment variables.

    Pass ``environ`` to read from an explicit mapping instead of the process
    environment (no ``.env`` loading happens in that case).

    Raises:
        ConfigError: API_KEY_PEPPER is missing outside the test environment.
            or a numeric variable does not parse.
    """
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ

    environment = environ.get("FANTASY_ENV", "development").strip().lower() or "development"
    pepper = environ.get("API_KEY_PEPPER", "").strip()
    if not pepper:
        if environment != "test":
            raise ConfigError("API_KEY_PEPPER is required")
        pepper = TEST_PEPPER

    db = DatabaseConfig(
        host=environ.get("FANTASY_DB_HOST", "127.0.0.1"),
        port=_int(environ, "FANTASY_DB_PORT", 5432),
        name=environ.get("FANTASY_DB_NAME", "fantasy_baseball"),
        user=environ.get("FANTASY_DB_USER", environ.get("USER", "postgres")),
        password=environ.get("FANTASY_DB_PASSWORD", ""),
    )

    auth = AuthConfig(
        pepper=pepper,
        disabled=_flag(environ.get("DISABLE_API_KEY_AUTH")),
    )

    sync = SyncConfig(
        enabled=_flag(environ.get("PLAYER_SYNC_ENABLED", "true")),
        cron=environ.get("PLAYER_SYNC_CRON", "0 3 * * *"),
        timezone=environ.get("PLAYER_SYNC_TIMEZONE", "UTC"),
        season=_int(environ, "PLAYER_SYNC_SEASON", date.today().year),
        mlb_api_url=environ.get("MLB_STATS_API_URL", "https://statsapi.mlb.com").rstrip("/"),
    )

    return Config(
        environment=environment,
        port=_int(environ, "PORT", 3001),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        db=db,
        auth=auth,
        sync=sync,
    )
