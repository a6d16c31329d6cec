"""
Module Automation - Error Handling

Errors raised by the augmenter itself when a module does not have the
shape it relies on. Author hook and injector failures are never wrapped:
they propagate to the host exactly as raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class ErrorSeverity(Enum):
    """Error severity levels."""

    ERROR = "error"
    CRITICAL = "critical"  # Lifecycle pass cannot continue


@dataclass
class ErrorContext:
    """Where an error was raised, with the active trace if there is one."""

    operation: str
    component: str
    module_name: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    trace_id: Optional[str] = None
    span_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "component": self.component,
            "module_name": self.module_name,
            "timestamp": self.timestamp.isoformat(),
            "trace_id": self.trace_id,
            "span_id": self.span_id,
        }

    @classmethod
    def from_current_span(
        cls,
        operation: str,
        component: str,
        **kwargs: Any
    ) -> "ErrorContext":
        """Create context from current OpenTelemetry span."""
        span = trace.get_current_span()
        trace_id = None
        span_id = None

        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                trace_id = format(ctx.trace_id, "032x")
                span_id = format(ctx.span_id, "016x")

        return cls(
            operation=operation,
            component=component,
            trace_id=trace_id,
            span_id=span_id,
            **kwargs
        )


class ModuleError(Exception):
    """
    Base exception for errors raised by the module automation layer.

    Records itself on the current OpenTelemetry span when created.
    """

    default_severity: ErrorSeverity = ErrorSeverity.ERROR
    error_code: str = "MODULE_ERROR"

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        severity: Optional[ErrorSeverity] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.severity = severity or self.default_severity
        self.cause = cause

        self._record_to_span()

    def attributes(self) -> Dict[str, Any]:
        """Span attributes describing this error."""
        attrs: Dict[str, Any] = {
            "error.code": self.error_code,
            "error.severity": self.severity.value,
        }
        if self.context:
            attrs["error.component"] = self.context.component
            attrs["error.operation"] = self.context.operation
        return attrs

    def _record_to_span(self) -> None:
        span = trace.get_current_span()
        if span and span.is_recording():
            span.set_status(Status(StatusCode.ERROR, self.message))
            span.record_exception(self)
            span.set_attributes(self.attributes())

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured reporting."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "context": self.context.to_dict() if self.context else None,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f" (component: {self.context.component})")
        if self.cause:
            parts.append(f" [caused by: {self.cause}]")
        return "".join(parts)


class ModuleContractError(ModuleError):
    """A module does not satisfy the shape the augmenter relies on."""

    error_code = "MODULE_CONTRACT_ERROR"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        module_name: Optional[str] = None,
        slot: Optional[str] = None,
        **kwargs: Any,
    ):
        # Set before the base records the span attributes
        self.module_name = module_name
        self.slot = slot
        super().__init__(message, **kwargs)

    def attributes(self) -> Dict[str, Any]:
        attrs = super().attributes()
        if self.module_name is not None:
            attrs["module.name"] = self.module_name
        if self.slot is not None:
            attrs["module.slot"] = self.slot
        return attrs

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["module_name"] = self.module_name
        data["slot"] = self.slot
        return data
