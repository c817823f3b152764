"""
WeatherAPI client.

Fetches the current Celsius temperature of a city through
``GET {base_url}/v1/current.json?key=...&q=...``.
"""

from typing import Optional

import httpx
import structlog

from shared.errors import ConfigurationError, WeatherError
from shared.metrics import ServiceMetrics
from shared.tracing import TracePropagation

logger = structlog.get_logger(__name__)


class WeatherApiClient:
    """Client for the weather lookup API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        tracing: TracePropagation,
        api_key: str,
        base_url: str = "http://api.weatherapi.com",
        metrics: Optional[ServiceMetrics] = None,
    ):
        """
        Initialize the weather client.

        Args:
            http_client: Shared async HTTP client
            tracing: Span and header propagation helper
            api_key: WeatherAPI key; may be empty, checked on each call
            base_url: Weather API base URL
            metrics: Optional metrics for outbound call outcomes
        """
        self.http_client = http_client
        self.tracing = tracing
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.metrics = metrics

    async def fetch_temperature(self, city: str) -> float:
        """
        Fetch the current temperature of a city.

        Args:
            city: City name, URL-encoded into the query string

        Returns:
            Temperature in Celsius as reported by the API

        Raises:
            ConfigurationError: If no API key is configured
            WeatherError: If the request fails or the response is unusable
        """
        with self.tracing.span("fetchTemperature", city=city):
            if not self.api_key:
                logger.error("weather_api_key_missing")
                raise ConfigurationError("missing WEATHERAPI_KEY")

            url = f"{self.base_url}/v1/current.json"
            try:
                response = await self.http_client.get(
                    url,
                    params={"key": self.api_key, "q": city},
                    headers=self.tracing.inject(),
                )
            except httpx.HTTPError as e:
                logger.warning("weather_request_failed", city=city, error=str(e))
                self._record("transport_error")
                raise WeatherError(str(e) or type(e).__name__) from e

            if response.status_code != httpx.codes.OK:
                logger.warning("weather_lookup_failed", city=city, status_code=response.status_code)
                self._record("http_error")
                raise WeatherError("failed to fetch temperature")

            try:
                temp_c = response.json()["current"]["temp_c"]
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("weather_response_invalid", city=city, error=str(e))
                self._record("invalid_response")
                raise WeatherError("invalid weather response") from e

            if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
                self._record("invalid_response")
                raise WeatherError("invalid weather response")

            self._record("success")
            logger.info("temperature_fetched", city=city, temp_c=temp_c)
            return float(temp_c)

    def _record(self, outcome: str) -> None:
        if self.metrics is not None:
            self.metrics.record_external_call("weatherapi", outcome)
