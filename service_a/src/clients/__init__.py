"""Clients for downstream services."""

from .temperature_client import TemperatureClient

__all__ = ["TemperatureClient"]
