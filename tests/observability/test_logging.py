"""
Tests for structured logging setup and the lifecycle logger.
"""
import io
import json
import logging

import pytest
import structlog

import observability.logging as obs_logging
from observability.logging import (
    LifecycleLogger,
    LogContext,
    LoggingConfig,
    add_service_context,
    format_exception,
    get_logger,
    setup_logging,
    shutdown_logging,
)


@pytest.fixture
def fresh_logging():
    """Reset logging state around a test."""
    shutdown_logging()
    yield
    shutdown_logging()


class TestProcessors:
    """Tests for the custom structlog processors."""

    def test_service_context(self):
        processor = add_service_context("orders-service", "testing")

        event = processor(None, "info", {"event": "started"})

        assert event["service"] == "orders-service"
        assert event["environment"] == "testing"

    def test_format_exception_instance(self):
        event = format_exception(None, "error", {"exc_info": KeyError("x")})

        assert "exc_info" not in event
        assert event["exception"]["type"] == "KeyError"


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def test_configures_once(self, fresh_logging):
        setup_logging(LoggingConfig(level="DEBUG", json_format=True))
        setup_logging(LoggingConfig(level="ERROR"))

        assert obs_logging._configured is True

    def test_get_logger_configures_on_first_use(self, fresh_logging):
        assert obs_logging._configured is False

        get_logger("orders")

        assert obs_logging._configured is True

    def test_json_output(self, capsys, fresh_logging):
        setup_logging(LoggingConfig(
            level="DEBUG", json_format=True, service_name="orders-service"
        ))

        LifecycleLogger().components_registered("orders", 3)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Components registered"
        assert record["module"] == "orders"
        assert record["components"] == 3
        assert record["service"] == "orders-service"

    def test_debug_suppressed_at_info(self, capsys, fresh_logging):
        setup_logging(LoggingConfig(level="INFO", json_format=True))

        LifecycleLogger().components_activated("orders", 2)

        assert "Components activated" not in capsys.readouterr().out

    def test_shutdown_resets_structlog(self, fresh_logging):
        setup_logging(LoggingConfig(level="INFO"))

        shutdown_logging()

        assert obs_logging._configured is False
        assert structlog.is_configured() is False

    def test_shutdown_tolerates_closed_stream(self, fresh_logging):
        """A handler whose stream was closed elsewhere is still released."""
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        logging.getLogger().addHandler(handler)
        stream.close()

        shutdown_logging()

        assert handler not in logging.getLogger().handlers


class TestLogContext:
    """Tests for LogContext."""

    def test_binds_for_the_block_only(self):
        with LogContext(module="orders", phase="start"):
            bound = structlog.contextvars.get_contextvars()

        assert bound["module"] == "orders"
        assert bound["phase"] == "start"
        assert "module" not in structlog.contextvars.get_contextvars()

    def test_nested_restores_outer_value(self):
        with LogContext(module="outer"):
            with LogContext(module="inner"):
                assert structlog.contextvars.get_contextvars()["module"] == "inner"
            assert structlog.contextvars.get_contextvars()["module"] == "outer"
