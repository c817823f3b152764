"""Shared pytest fixtures.

External APIs are served by ``FakeUpstream`` through ``httpx.MockTransport``
and spans are captured with an in-memory exporter.
"""

import httpx
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from service_a.src.config import Settings as FrontSettings
from service_a.src.main import create_app as create_front_app
from service_b.src.config import Settings as BackSettings
from service_b.src.main import create_app as create_back_app
from shared.tracing import TracePropagation
from tests.fakes import BACK_SERVICE_URL, FakeUpstream


# ============================================================================
# TRACING FIXTURES
# ============================================================================


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def front_tracing(tracer_provider) -> TracePropagation:
    return TracePropagation(tracer_provider.get_tracer("service-a"))


@pytest.fixture
def back_tracing(tracer_provider) -> TracePropagation:
    return TracePropagation(tracer_provider.get_tracer("service-b"))


# ============================================================================
# SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def upstream_client(upstream) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def back_settings() -> BackSettings:
    return BackSettings(weatherapi_key="test-key", _env_file=None)


@pytest.fixture
def back_app(back_settings, back_tracing, upstream_client):
    return create_back_app(back_settings, tracing=back_tracing, http_client=upstream_client)


@pytest.fixture
def front_settings() -> FrontSettings:
    return FrontSettings(back_service_url=BACK_SERVICE_URL, _env_file=None)


@pytest.fixture
def front_app(front_settings, front_tracing, back_app):
    """Front service wired to the back service through an in-process transport."""
    back_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=back_app))
    return create_front_app(front_settings, tracing=front_tracing, http_client=back_client)
