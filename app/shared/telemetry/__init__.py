"""Logging setup, OpenTelemetry tracing, and span helpers used by the use cases."""

from app.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_exporter,
    get_telemetry,
    set_telemetry,
)
from app.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    get_trace_id,
    traced,
)

__all__ = [
    "RequestIdFilter",
    "TelemetryConfig",
    "add_span_attributes",
    "add_span_event",
    "build_exporter",
    "get_logger",
    "get_telemetry",
    "get_trace_id",
    "set_telemetry",
    "setup_logging",
    "traced",
]
