"""
Tests for the combined observability setup.
"""
import pytest

import observability
from config import Config


@pytest.fixture
def recorded_setup(monkeypatch):
    """Replace the tracing and logging setup calls with recorders."""
    calls = []
    monkeypatch.setattr(observability, "setup_tracing", lambda cfg: calls.append(("tracing", cfg)))
    monkeypatch.setattr(observability, "setup_logging", lambda cfg: calls.append(("logging", cfg)))
    monkeypatch.setattr(observability, "shutdown_tracing", lambda: calls.append(("tracing", None)))
    monkeypatch.setattr(observability, "shutdown_logging", lambda: calls.append(("logging", None)))
    return calls


class TestSetupObservability:
    """Tests for setup_observability and shutdown_observability."""

    def test_configures_tracing_and_logging(self, recorded_setup):
        observability.setup_observability(
            service_name="orders-service",
            service_version="3.1.0",
            sample_rate=0.5,
            console_export=True,
            log_level="DEBUG",
            json_format=False,
            environment="staging",
        )

        (kind, tracing_cfg), (other, logging_cfg) = recorded_setup
        assert (kind, other) == ("tracing", "logging")
        assert tracing_cfg.service_name == "orders-service"
        assert tracing_cfg.service_version == "3.1.0"
        assert tracing_cfg.sample_rate == 0.5
        assert tracing_cfg.console_export is True
        assert tracing_cfg.environment == "staging"
        assert logging_cfg.level == "DEBUG"
        assert logging_cfg.json_format is False
        assert logging_cfg.service_name == "orders-service"

    def test_disabled_skips_tracing(self, recorded_setup):
        observability.setup_observability(enabled=False)

        assert [kind for kind, _ in recorded_setup] == ["logging"]

    def test_shutdown_releases_both(self, recorded_setup):
        observability.shutdown_observability()

        assert recorded_setup == [("tracing", None), ("logging", None)]


class TestConfigSetupObservability:
    """Config.setup_observability forwards every observability setting."""

    def test_forwards_settings(self, monkeypatch):
        received = {}
        monkeypatch.setattr(observability, "setup_observability", lambda **kw: received.update(kw))
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("DEBUG", "false")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("OTEL_ENABLED", "true")
        monkeypatch.setenv("OTEL_SERVICE_NAME", "orders-service")
        monkeypatch.setenv("OTEL_SERVICE_VERSION", "3.1.0")
        monkeypatch.setenv("OTEL_CONSOLE_EXPORT", "true")

        Config().setup_observability()

        assert received["service_name"] == "orders-service"
        assert received["service_version"] == "3.1.0"
        assert received["console_export"] is True
        assert received["enabled"] is True
        assert received["log_level"] == "WARNING"
        assert received["environment"] == "staging"

    def test_debug_forces_debug_level(self, monkeypatch):
        received = {}
        monkeypatch.setattr(observability, "setup_observability", lambda **kw: received.update(kw))
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        Config().setup_observability()

        assert received["log_level"] == "DEBUG"
