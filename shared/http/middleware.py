"""Request logging and metrics middleware shared by both services."""

import time

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from shared.metrics import ServiceMetrics

from .routing import method_label, route_template

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and metrics."""

    def __init__(self, app: ASGIApp, metrics: ServiceMetrics):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next):
        """Process request and log details."""
        method = request.method
        method_value = method_label(request)
        path = request.url.path
        endpoint = route_template(request)
        client_ip = request.client.host if request.client else "unknown"

        self.metrics.http_requests_in_progress.labels(method=method_value, endpoint=endpoint).inc()
        start_time = time.time()

        logger.info("request_started", method=method, path=path, client_ip=client_ip)

        try:
            response = await call_next(request)

            duration = time.time() - start_time

            self.metrics.http_requests_total.labels(
                method=method_value,
                endpoint=endpoint,
                status=response.status_code
            ).inc()
            self.metrics.http_request_duration_seconds.labels(
                method=method_value,
                endpoint=endpoint
            ).observe(duration)

            logger.info(
                "request_completed",
                method=method,
                path=path,
                status_code=response.status_code,
                duration=f"{duration:.3f}s",
            )
            return response

        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                "request_failed",
                method=method,
                path=path,
                error=str(e),
                duration=f"{duration:.3f}s",
                exc_info=True
            )
            raise

        finally:
            self.metrics.http_requests_in_progress.labels(method=method_value, endpoint=endpoint).dec()
