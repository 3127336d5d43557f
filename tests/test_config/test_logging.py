"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import io
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
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        """Chamadas repetidas mantêm um único handler no root."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "effect_core"

    def test_emits_json_with_context_fields(self) -> None:
        """Saída JSON traz correlation_id, effect e service injetados."""
        stream = io.StringIO()
        configure_logging(
            level="DEBUG",
            service_name="svc_test",
            correlation_id_getter=lambda: "corr-1",
            effect_name_getter=lambda: "switch-tab",
            stream=stream,
        )
        get_logger("effects.test").info("effect_completed", extra={"elapsed_ms": 1.5})

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "effect_completed"
        assert payload["correlation_id"] == "corr-1"
        assert payload["effect"] == "switch-tab"
        assert payload["service"] == "svc_test"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "effects.test"
        assert payload["elapsed_ms"] == 1.5


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")
        assert get_logger("same.module").name == "same.module"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        """Formato lazy: template e componente como args."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "notification_response")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "notification_response")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "notification_response"}

    def test_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "chain", reason="wait_timeout", elapsed_ms=12.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "wait_timeout"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_injects_values_from_getters(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123", lambda: "open-url")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.effect == "open-url"
        assert record.service == "my_service"

    def test_preserves_explicit_values(self) -> None:
        """Valores passados via extra não são sobrescritos."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        record.effect = "explicit-effect"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"
        assert record.effect == "explicit-effect"

    def test_uses_empty_strings_without_getters(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record(level=logging.ERROR)
        assert filter_.filter(record) is True
        assert record.correlation_id == ""
        assert record.effect == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields(self) -> None:
        assert isinstance(REQUIRED_LOG_FIELDS, frozenset)
        expected = {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "effect",
            "service",
        }
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_returns_json_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)
