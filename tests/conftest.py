"""
Module Automation - Test Configuration

Pytest fixtures and configuration for all tests.
"""
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

import observability.tracing as tracing
from tests.doubles import RecordingInjector, make_component


@pytest.fixture
def injector() -> RecordingInjector:
    """Injector double shared by every module in a test."""
    return RecordingInjector()


@pytest.fixture
def components():
    """Three distinct component classes A, B and C."""
    return make_component("A"), make_component("B"), make_component("C")


@pytest.fixture
def span_exporter(monkeypatch):
    """Route lifecycle spans into memory for the duration of a test."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "_tracer_provider", provider)
    yield exporter
    provider.shutdown()
