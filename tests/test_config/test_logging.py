"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
SensitiveDataFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REDACTED,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveDataFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_and_redaction_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SensitiveDataFilter) for f in filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "customer_gateway"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("my_service", lambda: "corr-123").filter(record)
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="explicit-id")
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc").filter(record) is True
        assert record.correlation_id == ""


class TestSensitiveDataFilter:
    """Segredos passados via extra nunca saem em claro."""

    def test_redacts_sensitive_keys(self) -> None:
        record = _record(client_secret="s3cr3t", access_token="tok", status_code=401)

        assert SensitiveDataFilter().filter(record) is True

        assert record.client_secret == REDACTED
        assert record.access_token == REDACTED
        assert record.status_code == 401

    def test_custom_keys_are_case_insensitive(self) -> None:
        record = _record(Authorization="Bearer tok")
        SensitiveDataFilter(["authorization"]).filter(record)
        assert record.Authorization == REDACTED


class TestCreateJsonFormatter:
    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        record = _record(
            "customer_api_call_failed",
            level=logging.ERROR,
            correlation_id="abc-123",
            service="customer_gateway",
            status_code=404,
        )

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "customer_api_call_failed"
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["status_code"] == 404
