"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, rate limiting, middleware,
routers. Settings are read inside create_app() so tests can set env (and
clear the get_settings cache) first.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)
from app.pages import render_root_page

# Routes that bound their own work instead of the request timeout.
UNBOUNDED_ROUTE_SUFFIXES = ("/notify-early-access",)

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and database readiness probes."},
    {"name": "auth", "description": "Staff login and the current user."},
    {"name": "search", "description": "Ranked search over published blogs, webinars and apps."},
    {"name": "apps", "description": "Early-access signups and launch notifications."},
]


def create_app() -> FastAPI:
    """Build the CMS API application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Public content search and early-access mailing for the research portal.",
        debug=settings.debug,
        openapi_tags=OPENAPI_TAGS,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # Outermost last: timeout wraps request ID, which wraps headers and CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", settings.request_id_header],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        TimeoutMiddleware,
        timeout_seconds=settings.request_timeout_seconds,
        exempt_path_suffixes=UNBOUNDED_ROUTE_SUFFIXES,
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root() -> HTMLResponse:
        return HTMLResponse(content=render_root_page(settings.app_name))

    return app


app = create_app()
