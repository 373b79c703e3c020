"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See tasknest.core.lifespan and tasknest.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from tasknest.api.v1 import api_router
from tasknest.core.config import get_settings
from tasknest.core.exception_handlers import register_exception_handlers
from tasknest.core.lifespan import create_lifespan
from tasknest.core.limiter import limiter
from tasknest.middleware import RequestIDMiddleware
from tasknest.shared.telemetry import TelemetryConfig, set_telemetry


def _setup_telemetry(app: FastAPI) -> None:
    """Install the tracer provider and instrument routes before the first request."""
    telemetry = TelemetryConfig.from_settings(get_settings())
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Last added = outermost: request ID wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    if settings.telemetry_enabled:
        _setup_telemetry(app)

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        """Service name, version and docs location."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
