"""Distributed tracing module using OpenTelemetry."""

from .otel_config import TracePropagation, configure_tracing

__all__ = ["TracePropagation", "configure_tracing"]
