"""Error taxonomy for the front and back services.

Each error carries the HTTP status code it maps to at the service boundary.
The message is returned to the client as the response body.
"""

from typing import Optional


class ServiceError(Exception):
    """Base class for errors surfaced to HTTP clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    """Malformed client input (400 or 422)."""

    status_code = 400


class MethodError(ServiceError):
    """HTTP method not supported by the endpoint."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class ResolutionError(ServiceError):
    """Postal code could not be resolved to a city."""

    status_code = 404

    def __init__(self, message: str = "can not find zipcode"):
        super().__init__(message)


class ConfigurationError(ServiceError):
    """Required process configuration is missing."""

    status_code = 500


class UpstreamError(ServiceError):
    """Transport failure or non-success status from a downstream call."""

    status_code = 500


class WeatherError(UpstreamError):
    """Weather lookup failed."""
