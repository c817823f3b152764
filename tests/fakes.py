"""Fake external APIs and span helpers for the test suite."""

from typing import Any, Dict, List, Optional

import httpx
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

VIACEP_HOST = "viacep.com.br"
WEATHERAPI_HOST = "api.weatherapi.com"
BACK_SERVICE_URL = "http://service-b:8081"

TRACE_ID_HEX = "0af7651916cd43dd8448eb211c80319c"
TRACEPARENT = f"00-{TRACE_ID_HEX}-b7ad6b7169203331-01"


class FakeUpstream:
    """Canned ViaCEP and WeatherAPI responses, recording every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.location_status = 200
        self.location_body: Any = {"cep": "01001-000", "localidade": "São Paulo", "uf": "SP"}
        self.location_error: Optional[Exception] = None
        self.weather_status = 200
        self.weather_body: Any = {"location": {"name": "Sao Paulo"}, "current": {"temp_c": 25.5}}
        self.weather_error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == VIACEP_HOST:
            if self.location_error is not None:
                raise self.location_error
            return self._respond(self.location_status, self.location_body)

        if request.url.host == WEATHERAPI_HOST:
            if self.weather_error is not None:
                raise self.weather_error
            return self._respond(self.weather_status, self.weather_body)

        return httpx.Response(404, text="404 page not found")

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    @staticmethod
    def _respond(status: int, body: Any) -> httpx.Response:
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)


def spans_by_service(span_exporter: InMemorySpanExporter) -> Dict[str, List[Any]]:
    """Group finished spans by the name of the tracer that created them."""
    grouped: Dict[str, List[Any]] = {}
    for span in span_exporter.get_finished_spans():
        grouped.setdefault(span.instrumentation_scope.name, []).append(span)
    return grouped
