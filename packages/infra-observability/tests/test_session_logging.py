"""Unit tests for kitsci.infra.observability.logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from kitsci.foundation.application.drift import validate_game_entities
from kitsci.infra.observability.logging import (
    LIBRARY_LOGGER,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)


@pytest.fixture(autouse=True)
def _restore_library_logger() -> Iterator[None]:
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    yield
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.environment == "development"

    @pytest.mark.unit
    def test_use_json_logs(self) -> None:
        assert LoggingSettings(environment="production").use_json_logs is True
        assert LoggingSettings(environment="test").use_json_logs is False

    @pytest.mark.unit
    def test_normalize_log_level(self) -> None:
        settings = LoggingSettings(log_level="debug")
        assert settings.log_level == "DEBUG"
        assert settings.log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            LoggingSettings(log_level="CHATTY")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "WARNING", "ENVIRONMENT": "production"}
        with patch.dict("os.environ", env, clear=True):
            get_logging_settings.cache_clear()
            settings = get_logging_settings()
            assert settings.log_level == "WARNING"
            assert settings.environment == "production"
        get_logging_settings.cache_clear()


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()
        get_logging_settings.cache_clear()
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.INFO

    @pytest.mark.unit
    def test_reconfiguring_does_not_duplicate_handler(self) -> None:
        settings = LoggingSettings(environment="production")
        configure_logging(settings)
        configure_logging(settings)
        names = [handler.get_name() for handler in logging.getLogger(LIBRARY_LOGGER).handlers]
        assert names.count("kitsci-structlog") == 1

    @pytest.mark.unit
    def test_library_records_rendered_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(environment="production"))
        logging.getLogger("kitsci.foundation.domain.legacy").warning(
            "legacy_value_ignored", extra={"key": "set-hut-max", "kind": "limit"}
        )
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "legacy_value_ignored"
        assert event["key"] == "set-hut-max"
        assert event["level"] == "warning"
        assert event["logger"] == "kitsci.foundation.domain.legacy"

    @pytest.mark.unit
    def test_level_filters_library_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(log_level="ERROR", environment="production"))
        logging.getLogger("kitsci.domain.engine.service").info("settings_imported")
        assert "settings_imported" not in capsys.readouterr().err


class TestGetLogger:
    @pytest.mark.unit
    def test_structlog_logger_is_drift_sink(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LoggingSettings(environment="production"))
        sink = get_logger("kitsci.drift")
        report = validate_game_entities(["a"], ["b"], subject="race", sink=sink)
        output = capsys.readouterr().out
        assert report.has_drift is True
        assert "The race 'a' is not tracked in Kitten Scientists!" in output
        assert '"logger": "kitsci.drift"' in output

    @pytest.mark.unit
    def test_returns_unbound_logger_when_no_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        assert get_logger() is not None
