"""Tests for fantasy_baseball.logging_config."""

import json
import logging

import pytest

from fantasy_baseball.config import Config
from fantasy_baseball.logging_config import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg="Synced %d players", args=(3,), exc_info=None):
    return logging.LogRecord("fantasy_baseball.jobs.sync", logging.INFO, __file__, 1, msg, args, exc_info)


class TestJsonFormatter:
    def test_fields(self):
        data = json.loads(JsonFormatter().format(_record()))
        assert data["level"] == "info"
        assert data["logger"] == "fantasy_baseball.jobs.sync"
        assert data["message"] == "Synced 3 players"
        assert data["timestamp"].endswith("+00:00")
        assert "exc_info" not in data

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = _record("Player sync failed", (), sys.exc_info())
        data = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in data["exc_info"]


class TestConfigure:
    def test_production_uses_json(self):
        configure_logging(Config(environment="production", log_level="WARNING"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.WARNING

    def test_development_uses_text(self):
        configure_logging(Config(environment="development"))
        assert not isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
