"""
Temperature service: postal code to city temperature report.

The city lookup always completes before the weather lookup starts since the
weather query is the resolved city name.
"""

import structlog

from service_b.src.clients import ViaCepClient, WeatherApiClient
from shared.models import TemperatureReport

logger = structlog.get_logger(__name__)


class TemperatureService:
    """Orchestrates the directory and weather lookups."""

    def __init__(self, location_client: ViaCepClient, weather_client: WeatherApiClient):
        self.location_client = location_client
        self.weather_client = weather_client

    async def get_report(self, cep: str) -> TemperatureReport:
        """
        Build the temperature report for a validated postal code.

        Args:
            cep: 8-digit postal code

        Returns:
            TemperatureReport for the postal code's city

        Raises:
            ResolutionError: If the city can not be resolved
            ConfigurationError: If the weather API key is missing
            WeatherError: If the weather lookup fails
        """
        city = await self.location_client.fetch_location(cep)
        temp_c = await self.weather_client.fetch_temperature(city)

        report = TemperatureReport.from_celsius(city, temp_c)
        logger.info(
            "temperature_report_built",
            cep=cep,
            city=report.city,
            temp_c=report.temp_C,
            temp_f=report.temp_F,
            temp_k=report.temp_K,
        )
        return report
