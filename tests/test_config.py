"""Tests for settings and logging."""

import logging

import pytest

from patterns import (
    NoSuchPatternError,
    Patterns,
    configure_logging,
    equals_to,
    get_settings,
    patterns,
    then,
    when,
)
from patterns.core.log import PackageHandler


class TestSettings:
    def test_defaults(self):
        settings = get_settings()

        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.optional_accessor == "Patterns.get_optionally"
        assert set(type(settings).model_fields) == {"debug", "log_level", "optional_accessor"}

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PATTERNS_DEBUG", "true")
        monkeypatch.setenv("PATTERNS_LOG_LEVEL", "DEBUG")

        settings = get_settings()
        assert settings.debug is True
        assert settings.log_level == "DEBUG"

    def test_accessor_in_error_hint(self, monkeypatch):
        monkeypatch.setenv("PATTERNS_OPTIONAL_ACCESSOR", "table.get_optionally")
        table = patterns(when(equals_to(1), then("a")))

        with pytest.raises(NoSuchPatternError, match="consider using table.get_optionally"):
            table(2)

    def test_accessor_per_table(self):
        table = Patterns([when(equals_to(1), then("a"))], optional_accessor="lookup.maybe")

        with pytest.raises(NoSuchPatternError, match="consider using lookup.maybe"):
            table(2)


class TestLogging:
    def test_debug_logs_evaluations(self, monkeypatch, caplog):
        monkeypatch.setenv("PATTERNS_DEBUG", "true")
        table = patterns(when(equals_to(1), then("a"), description="is one"))

        with caplog.at_level(logging.DEBUG, logger="patterns"):
            table(1)
            table.get_optionally(2)

        messages = [r.getMessage() for r in caplog.records]
        assert "Key 1 matched clause 0 (is one)" in messages
        assert "Key 2 matched no clause" in messages

    def test_debug_enabled_after_table_built(self, monkeypatch, caplog):
        table = patterns(when(equals_to(1), then("a"), description="is one"))
        monkeypatch.setenv("PATTERNS_DEBUG", "true")
        get_settings.cache_clear()

        with caplog.at_level(logging.DEBUG, logger="patterns"):
            table(1)

        assert "Key 1 matched clause 0 (is one)" in [r.getMessage() for r in caplog.records]

    def test_quiet_without_debug(self, caplog):
        table = patterns(when(equals_to(1), then("a")))

        with caplog.at_level(logging.DEBUG, logger="patterns.runtime"):
            table(1)

        assert not [r for r in caplog.records if r.name == "patterns.runtime.evaluator"]

    def test_configure_logging(self, monkeypatch):
        monkeypatch.setenv("PATTERNS_LOG_LEVEL", "info")

        logger = configure_logging()
        handlers = list(logger.handlers)
        configure_logging("ERROR")

        assert logger.name == "patterns"
        assert logger.level == logging.ERROR
        assert logger.handlers == handlers
        assert sum(isinstance(h, PackageHandler) for h in logger.handlers) == 1
