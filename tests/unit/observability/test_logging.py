"""Unit tests for observability logging."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from shiplink.kernel.time import FrozenClock
from shiplink.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    Logger,
    SensitiveFieldsFilter,
    get_logger,
)
from shiplink.resilience.circuit_breaker import CircuitBreaker, CircuitBreakerConfig


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"api_key": "s3cr3t", "warehouse": "reno-1"})
        assert result["api_key"] == SensitiveFieldsFilter.REDACTED
        assert result["warehouse"] == "reno-1"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({field: "value" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"Authorization": "Bearer x", "X-Webhook-Signature": "sha256=..", "ok": 1})
        assert result["Authorization"] == SensitiveFieldsFilter.REDACTED
        assert result["X-Webhook-Signature"] == SensitiveFieldsFilter.REDACTED
        assert result["ok"] == 1

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"secret_key"}))
        result = f.redact({"secret_key": "abc", "password": "keep"})
        assert result["secret_key"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        f = SensitiveFieldsFilter()
        data: dict[str, Any] = {"endpoint": "e1", "headers": {"authorization": "Bearer x"}}
        result = f.redact_deep(data)
        assert result["endpoint"] == "e1"
        assert result["headers"]["authorization"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        original = {"password": "secret"}
        SensitiveFieldsFilter().redact(original)
        assert original["password"] == "secret"

    def test_works_as_structlog_processor(self) -> None:
        f = SensitiveFieldsFilter()
        event = f(None, "info", {"event": "wms.auth", "token": "abc"})
        assert event == {"event": "wms.auth", "token": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests", circuit_breaker="wms:shiphero").info("something.happened", n=1)
        assert logs == [
            {"event": "something.happened", "log_level": "info", "circuit_breaker": "wms:shiphero", "n": 1}
        ]

    def test_satisfies_logger_protocol(self) -> None:
        logger: Logger = get_logger("tests")
        with capture_logs() as logs:
            logger.warning("careful")
        assert logs[0]["log_level"] == "warning"

    def test_bind_adds_context(self) -> None:
        with capture_logs() as logs:
            logger = get_logger("tests", endpoint_id="e1").bind(attempt=2)
            logger.error("webhook.delivery_failed")
        assert logs == [
            {"event": "webhook.delivery_failed", "log_level": "error", "endpoint_id": "e1", "attempt": 2}
        ]


class TestCircuitBreakerLogEvents:
    def test_transitions_are_logged(self) -> None:
        async def boom() -> None:
            raise RuntimeError("upstream 503")

        async def ok() -> str:
            return "ok"

        async def run() -> list[dict[str, Any]]:
            clock = FrozenClock()
            with capture_logs() as logs:
                cb = CircuitBreaker(CircuitBreakerConfig("wms:logged", 1, 1000, 5000), clock=clock)
                with pytest.raises(RuntimeError):
                    await cb.execute(boom)
                clock.advance(seconds=1)
                await cb.execute(ok)
            return logs

        logs = asyncio.run(run())
        events = [entry["event"] for entry in logs]
        assert events == [
            "circuit_breaker.initialized",
            "circuit_breaker.failure",
            "circuit_breaker.opened",
            "circuit_breaker.half_open",
            "circuit_breaker.closed",
        ]
        assert all(entry["circuit_breaker"] == "wms:logged" for entry in logs)
        opened = logs[2]
        assert opened["log_level"] == "error"
        assert opened["recent_failure_count"] == 1


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_renders_json_with_redaction(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("shiplink.test").info("webhook.sent", endpoint_id="e1", secret="hunter2")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "webhook.sent"
        assert payload["endpoint_id"] == "e1"
        assert payload["secret"] == SensitiveFieldsFilter.REDACTED
        assert payload["level"] == "info"
        assert payload["logger"] == "shiplink.test"
        assert "timestamp" in payload

    def test_redaction_can_be_disabled(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(redact=False)
        structlog.get_logger("shiplink.test").info("raw", token="abc")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["token"] == "abc"

    def test_level_filters_records(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        structlog.get_logger("shiplink.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_stdlib_records_share_the_format(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        logging.getLogger("httpx").warning("retrying %s", "wms")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["event"] == "retrying wms"
        assert payload["logger"] == "httpx"
        assert payload["level"] == "warning"

    def test_exception_is_rendered(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        try:
            raise RuntimeError("upstream 503")
        except RuntimeError:
            structlog.get_logger("shiplink.test").exception("webhook.crashed")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["event"] == "webhook.crashed"
        assert "RuntimeError: upstream 503" in payload["exception"]
