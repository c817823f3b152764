"""Metrics module using Prometheus."""

from .prometheus_metrics import CONTENT_TYPE_LATEST, ServiceMetrics, get_metrics_handler

__all__ = [
    "CONTENT_TYPE_LATEST",
    "ServiceMetrics",
    "get_metrics_handler",
]
