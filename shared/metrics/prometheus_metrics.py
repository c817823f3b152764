"""Prometheus metrics definitions and helpers.

Each service app owns a registry so two apps can live in one process.
"""

from typing import Callable, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)


class ServiceMetrics:
    """HTTP and external call metrics for a service."""

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        """Initialize service metrics.

        Args:
            registry: Prometheus registry to use (a fresh one by default)
        """
        self.registry = registry if registry is not None else CollectorRegistry()

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )

        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry,
        )

        self.http_requests_in_progress = Gauge(
            "http_requests_in_progress",
            "HTTP requests currently in progress",
            ["method", "endpoint"],
            registry=self.registry,
        )

        # Outbound calls to the back service and the external APIs
        self.external_calls_total = Counter(
            "external_calls_total",
            "Total outbound HTTP calls",
            ["target", "outcome"],
            registry=self.registry,
        )

    def record_external_call(self, target: str, outcome: str) -> None:
        self.external_calls_total.labels(target=target, outcome=outcome).inc()


def get_metrics_handler(metrics: ServiceMetrics) -> Callable[[], bytes]:
    """Get metrics handler for HTTP endpoint.

    Args:
        metrics: Metrics whose registry is exposed

    Returns:
        Function that generates Prometheus metrics output
    """

    def metrics_handler() -> bytes:
        return generate_latest(metrics.registry)

    return metrics_handler


__all__ = ["CONTENT_TYPE_LATEST", "ServiceMetrics", "get_metrics_handler"]
