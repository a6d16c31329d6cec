"""
Module Automation - Observability Package

Tracing and structured logging for the module lifecycle.

Components:
- tracing: OpenTelemetry spans around component registration and activation
- logging: Structlog integration with trace context propagation

Usage:
    from observability import setup_observability, get_logger

    setup_observability(service_name="orders-service", log_level="DEBUG")
    logger = get_logger(__name__)
"""
from .tracing import (
    setup_tracing,
    get_tracer,
    create_span,
    TracingConfig,
    shutdown_tracing,
)
from .logging import (
    setup_logging,
    get_logger,
    LoggingConfig,
    LifecycleLogger,
    LogContext,
    shutdown_logging,
)

__all__ = [
    # Tracing
    "setup_tracing",
    "get_tracer",
    "create_span",
    "TracingConfig",
    "shutdown_tracing",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "LifecycleLogger",
    "LogContext",
    "shutdown_logging",
    # Combined setup
    "setup_observability",
    "shutdown_observability",
]

__version__ = "0.1.0"


def setup_observability(
    service_name: str = "module-automation",
    service_version: str = "0.1.0",
    otlp_endpoint: str = "http://localhost:4317",
    enabled: bool = True,
    sample_rate: float = 1.0,
    console_export: bool = False,
    log_level: str = "INFO",
    json_format: bool = True,
    environment: str = "development",
) -> None:
    """
    Initialize tracing and logging together.

    Tracing is only installed when ``enabled`` is true; logging is always
    configured.
    """
    if enabled:
        setup_tracing(TracingConfig(
            service_name=service_name,
            service_version=service_version,
            otlp_endpoint=otlp_endpoint,
            enabled=enabled,
            sample_rate=sample_rate,
            console_export=console_export,
            environment=environment,
        ))

    setup_logging(LoggingConfig(
        service_name=service_name,
        level=log_level,
        json_format=json_format,
        environment=environment,
    ))


def shutdown_observability() -> None:
    """Flush spans and release logging handlers."""
    shutdown_tracing()
    shutdown_logging()
