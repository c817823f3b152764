"""Business services for the back service."""

from .temperature_service import TemperatureService

__all__ = ["TemperatureService"]
