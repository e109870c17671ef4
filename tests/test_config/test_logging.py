"""Testes de config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_installs_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "release_date_proxy"


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "version_resolver")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "version_resolver")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "version_resolver"}

    def test_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "version_resolver", reason="version_missing", elapsed_ms=1.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "version_missing"
        assert extra["elapsed_ms"] == 1.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json(self) -> None:
        formatter = create_json_formatter()
        record = _record("upstream_fetched")
        record.correlation_id = "abc-123"
        record.service = "release_date_proxy"
        record.version = "f-41"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "upstream_fetched"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test.logger"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "release_date_proxy"
        assert payload["version"] == "f-41"
