"""OpenTelemetry tracing for the CMS API.

Built from Settings at startup (see app.core.lifespan). Spans cover HTTP
requests, content store queries and signup writes; log records get the
active trace and span ids.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from app.core.config import Settings

logger = logging.getLogger(__name__)

EXPORTERS = ("console", "otlp", "none")

# Probes are polled constantly; tracing them only adds noise.
UNTRACED_URLS = "/api/v1/health,/api/v1/health/ready"


def build_exporter(exporter_type: str, otlp_endpoint: str | None = None) -> SpanExporter | None:
    """Return the span exporter for exporter_type; None means spans are not exported.

    An otlp exporter without an endpoint falls back to console.
    """
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("TELEMETRY_OTLP_ENDPOINT not set; exporting spans to console")
    elif exporter_type != "console":
        logger.warning("Unknown telemetry exporter %r; exporting spans to console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus the instrumentations attached to it."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: One of EXPORTERS.
            otlp_endpoint: OTLP gRPC endpoint, e.g. http://collector:4317.
            sample_rate: Fraction of traces kept, 0.0 to 1.0.

        Returns:
            The provider, or None when telemetry is disabled or setup failed.
            A failed setup never stops the API from starting.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Failed to initialize telemetry")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing %s %s (%s) with exporter=%s sample_rate=%s",
            self.service_name,
            self.service_version,
            self.environment,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument(self, app: "FastAPI", engine: "AsyncEngine | None" = None) -> None:
        """Attach FastAPI, SQLAlchemy (when an engine exists) and logging instrumentation."""
        if self.tracer_provider is None:
            return
        steps = [
            (
                "FastAPI",
                lambda: FastAPIInstrumentor.instrument_app(
                    app, tracer_provider=self.tracer_provider, excluded_urls=UNTRACED_URLS
                ),
            ),
            (
                "logging",
                lambda: LoggingInstrumentor().instrument(tracer_provider=self.tracer_provider),
            ),
        ]
        if engine is not None:
            steps.append(
                (
                    "SQLAlchemy",
                    lambda: SQLAlchemyInstrumentor().instrument(
                        engine=engine.sync_engine, tracer_provider=self.tracer_provider
                    ),
                )
            )
        for name, step in steps:
            try:
                step()
            except Exception:
                logger.exception("Failed to instrument %s", name)
            else:
                logger.debug("%s instrumentation enabled", name)

    def shutdown(self) -> None:
        """Flush pending spans and release the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Error during telemetry shutdown")
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Install (or clear, with None) the process-wide telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
