"""Clients for the external directory and weather APIs."""

from .viacep_client import ViaCepClient
from .weatherapi_client import WeatherApiClient

__all__ = ["ViaCepClient", "WeatherApiClient"]
