"""Service error types and their HTTP mapping."""

from .exceptions import (
    ConfigurationError,
    MethodError,
    ResolutionError,
    ServiceError,
    UpstreamError,
    ValidationError,
    WeatherError,
)
from .handlers import register_exception_handlers, service_error_handler

__all__ = [
    "ConfigurationError",
    "MethodError",
    "ResolutionError",
    "ServiceError",
    "UpstreamError",
    "ValidationError",
    "WeatherError",
    "register_exception_handlers",
    "service_error_handler",
]
