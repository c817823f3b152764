"""Data models shared by the front and back services."""

from .common import CepRequest, HealthResponse, HealthStatus, TemperatureReport

__all__ = ["CepRequest", "HealthResponse", "HealthStatus", "TemperatureReport"]
