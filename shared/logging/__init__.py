"""Structured logging module using structlog."""

from .structured_logger import add_trace_context, configure_logging

__all__ = ["add_trace_context", "configure_logging"]
