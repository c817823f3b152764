"""
FastAPI application entry point for the front service (service-a).

Accepts a postal code, validates it and delegates to the back service.
Provides:
- POST / temperature endpoint
- Health and Prometheus metrics endpoints
- Request logging with structlog
- W3C trace context propagation to the back service, exported to Zipkin
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
import structlog
import uvicorn
from fastapi import FastAPI, Response

from service_a.src.clients import TemperatureClient
from service_a.src.config import Settings, get_settings
from service_a.src.routers import temperature_router
from shared.errors import register_exception_handlers
from shared.http import RequestLoggingMiddleware
from shared.logging import configure_logging
from shared.metrics import CONTENT_TYPE_LATEST, ServiceMetrics, get_metrics_handler
from shared.models import HealthResponse
from shared.tracing import TracePropagation, configure_tracing

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    tracing: Optional[TracePropagation] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    metrics: Optional[ServiceMetrics] = None,
) -> FastAPI:
    """
    Build the front service application.

    Args:
        settings: Service settings
        tracing: Tracing dependency used by the handler and the client
        http_client: HTTP client for the back service
        metrics: Prometheus metrics

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    metrics = metrics or ServiceMetrics()

    provider = None
    if tracing is None:
        logger.info("initializing_tracing", zipkin_endpoint=settings.zipkin_endpoint)
        provider = configure_tracing(settings.service_name, settings.zipkin_endpoint)
        tracing = TracePropagation.from_provider(provider, settings.service_name)

    owns_client = http_client is None
    if owns_client:
        # No timeout unless configured: a hung back service holds the request
        http_client = httpx.AsyncClient(timeout=settings.http_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("application_started", service=settings.service_name, version=settings.app_version)
        yield
        logger.info("application_shutting_down")
        if owns_client:
            await http_client.aclose()
        if provider is not None:
            provider.shutdown()
        logger.info("application_shutdown_complete")

    app = FastAPI(
        title=settings.service_name,
        version=settings.app_version,
        description="Postal code validation front for the temperature service.",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.tracing = tracing
    app.state.metrics = metrics
    app.state.temperature_client = TemperatureClient(
        http_client,
        tracing,
        base_url=settings.back_service_url,
        metrics=metrics,
    )

    app.add_middleware(RequestLoggingMiddleware, metrics=metrics)
    register_exception_handlers(app)

    metrics_handler = get_metrics_handler(metrics)

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(service=settings.service_name, version=settings.app_version)

    @app.get("/metrics", tags=["Monitoring"])
    async def metrics_endpoint() -> Response:
        """Prometheus metrics endpoint."""
        return Response(content=metrics_handler(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(temperature_router)

    return app


def run() -> None:
    """Run the front service with Uvicorn."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    logger.info("starting_server", host=settings.host, port=settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
