"""
Back service client.

Calls ``GET {base_url}/cep/{cep}`` on the back service with the active
trace context in the request headers.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from shared.errors import UpstreamError
from shared.metrics import ServiceMetrics
from shared.tracing import TracePropagation

logger = structlog.get_logger(__name__)


class TemperatureClient:
    """Client for the back service temperature endpoint."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        tracing: TracePropagation,
        base_url: str = "http://service-b:8081",
        metrics: Optional[ServiceMetrics] = None,
    ):
        self.http_client = http_client
        self.tracing = tracing
        self.base_url = base_url.rstrip("/")
        self.metrics = metrics

    async def fetch_temperature_by_cep(self, cep: str) -> Dict[str, Any]:
        """
        Fetch the temperature report for a postal code.

        The back service body is returned as decoded, without adding,
        renaming or dropping fields.

        Args:
            cep: Validated 8-digit postal code

        Returns:
            Temperature report as returned by the back service

        Raises:
            UpstreamError: On transport failure, a non-200 status (carrying
                the back service's error message) or an undecodable body
        """
        with self.tracing.span("fetchTemperatureByCEP", cep=cep):
            url = f"{self.base_url}/cep/{cep}"
            try:
                response = await self.http_client.get(url, headers=self.tracing.inject())
            except httpx.HTTPError as e:
                logger.error("back_service_request_failed", cep=cep, error=str(e))
                self._record("transport_error")
                raise UpstreamError(str(e) or type(e).__name__) from e

            if response.status_code != httpx.codes.OK:
                logger.warning(
                    "back_service_error",
                    cep=cep,
                    status_code=response.status_code,
                    body=response.text,
                )
                self._record("http_error")
                raise UpstreamError(response.text or f"can not fetch temperature by CEP: {cep}")

            try:
                data = response.json()
            except ValueError as e:
                logger.error("back_service_response_invalid", cep=cep, error=str(e))
                self._record("invalid_response")
                raise UpstreamError(str(e)) from e

            self._record("success")
            return data

    def _record(self, outcome: str) -> None:
        if self.metrics is not None:
            self.metrics.record_external_call("service-b", outcome)
