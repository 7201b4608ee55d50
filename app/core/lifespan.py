"""Application lifespan: startup and shutdown.

Startup configures logging and, when enabled, tracing. Shutdown flushes
spans and disposes the SQL engine. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def _start_telemetry(app: FastAPI) -> None:
    settings = get_settings()
    telemetry = TelemetryConfig.from_settings(settings)
    provider = telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    if provider is None:
        return
    telemetry.instrument(app, database._ensure_engine())
    set_telemetry(telemetry)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup, serve, then shut down."""
    settings = get_settings()
    setup_logging()
    if settings.telemetry_enabled:
        _start_telemetry(app)
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
    if database.engine is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
