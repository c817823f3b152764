"""
ViaCEP directory client.

Resolves a postal code to the name of its city through
``GET {base_url}/ws/{cep}/json/``.
"""

from typing import Optional

import httpx
import structlog

from shared.errors import ResolutionError
from shared.metrics import ServiceMetrics
from shared.tracing import TracePropagation

logger = structlog.get_logger(__name__)


class ViaCepClient:
    """Client for the postal code directory API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        tracing: TracePropagation,
        base_url: str = "https://viacep.com.br",
        metrics: Optional[ServiceMetrics] = None,
    ):
        """
        Initialize the directory client.

        Args:
            http_client: Shared async HTTP client
            tracing: Span and header propagation helper
            base_url: Directory API base URL
            metrics: Optional metrics for outbound call outcomes
        """
        self.http_client = http_client
        self.tracing = tracing
        self.base_url = base_url.rstrip("/")
        self.metrics = metrics

    async def fetch_location(self, cep: str) -> str:
        """
        Resolve a postal code to its city name.

        Any failure (transport, non-200 status, unreadable body or an empty
        ``localidade``) is reported the same way to the caller.

        Args:
            cep: Validated 8-digit postal code

        Returns:
            City name

        Raises:
            ResolutionError: If the postal code can not be resolved
        """
        with self.tracing.span("fetchLocation", cep=cep):
            url = f"{self.base_url}/ws/{cep}/json/"
            try:
                response = await self.http_client.get(url, headers=self.tracing.inject())
            except httpx.HTTPError as e:
                logger.warning("location_request_failed", cep=cep, error=str(e))
                self._record("transport_error")
                raise ResolutionError() from e

            if response.status_code != httpx.codes.OK:
                logger.warning("location_lookup_failed", cep=cep, status_code=response.status_code)
                self._record("http_error")
                raise ResolutionError()

            try:
                data = response.json()
            except ValueError as e:
                logger.warning("location_response_invalid", cep=cep, error=str(e))
                self._record("invalid_response")
                raise ResolutionError() from e

            city = data.get("localidade") if isinstance(data, dict) else None
            if not city or not isinstance(city, str):
                logger.info("location_not_found", cep=cep)
                self._record("not_found")
                raise ResolutionError()

            self._record("success")
            logger.info("location_resolved", cep=cep, city=city)
            return city

    def _record(self, outcome: str) -> None:
        if self.metrics is not None:
            self.metrics.record_external_call("viacep", outcome)
