"""OpenTelemetry tracing for tasknest.

Off unless TELEMETRY_ENABLED. TelemetryConfig.from_settings() is called once
from create_app(); the lifespan instruments the engine and flushes on exit.
Exporters: console, otlp, or none.
"""

import logging
import threading
from collections.abc import Callable

from fastapi import FastAPI
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
from sqlalchemy.ext.asyncio import AsyncEngine

from tasknest.core.config import Settings

logger = logging.getLogger(__name__)

# Liveness probes are not traced.
_UNTRACED_URLS = "/api/v1/health"


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Return the span exporter for exporter_type; None means spans are dropped."""
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint,
                insecure=otlp_endpoint.startswith("http://"),
            )
        logger.warning("TELEMETRY_OTLP_ENDPOINT not set; falling back to console")
    elif exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus FastAPI, SQLAlchemy and logging instrumentation."""

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
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        """Build and start telemetry from application settings."""
        telemetry = cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        return telemetry

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: "console", "otlp", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Sampling rate 0.0-1.0.

        Returns:
            TracerProvider, or None if disabled or setup failed. A failure is
            logged and leaves the service running untraced.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            )
            provider = TracerProvider(
                resource=resource, sampler=TraceIdRatioBased(sample_rate)
            )
            exporter = _build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Failed to initialize telemetry")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing started: service=%s exporter=%s sample_rate=%s",
            self.service_name,
            exporter_type,
            sample_rate,
        )
        return provider

    def _instrument(self, what: str, apply: Callable[[TracerProvider], None]) -> None:
        if not self.enabled or self.tracer_provider is None:
            return
        try:
            apply(self.tracer_provider)
        except Exception:
            logger.exception("Failed to instrument %s", what)
            return
        logger.info("%s instrumentation enabled", what)

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every route except the liveness probe."""
        self._instrument(
            "FastAPI",
            lambda provider: FastAPIInstrumentor.instrument_app(
                app, tracer_provider=provider, excluded_urls=_UNTRACED_URLS
            ),
        )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace statements issued through engine (instrumented on its sync core)."""
        self._instrument(
            "SQLAlchemy",
            lambda provider: SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine, tracer_provider=provider
            ),
        )

    def instrument_logging(self) -> None:
        """Inject trace_id / span_id into log records."""
        self._instrument(
            "Logging",
            lambda provider: LoggingInstrumentor().instrument(
                tracer_provider=provider, set_logging_format=True
            ),
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Error during telemetry shutdown")
            return
        logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process-wide telemetry instance (set by create_app)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the process-wide telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
