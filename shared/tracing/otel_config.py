"""OpenTelemetry configuration for distributed tracing.

Builds the per-process tracer provider exporting to Zipkin and the
propagation helper that handlers and HTTP clients receive explicitly.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, MutableMapping, Optional

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.exporter.zipkin.json import ZipkinExporter
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.trace import Status, StatusCode
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator


def configure_tracing(
    service_name: str,
    zipkin_endpoint: str = "http://zipkin:9411/api/v2/spans",
) -> TracerProvider:
    """Configure OpenTelemetry tracing for the service.

    Every trace is sampled. The provider is returned rather than installed
    globally; callers hand a tracer from it to the components that need one.

    Args:
        service_name: Name of the service (e.g., "service-a")
        zipkin_endpoint: Zipkin span collection URL

    Returns:
        Configured TracerProvider
    """
    resource = Resource.create({SERVICE_NAME: service_name})

    provider = TracerProvider(resource=resource, sampler=ALWAYS_ON)

    zipkin_exporter = ZipkinExporter(endpoint=zipkin_endpoint)
    provider.add_span_processor(BatchSpanProcessor(zipkin_exporter))

    return provider


class TracePropagation:
    """Span creation and W3C trace context propagation for one service."""

    def __init__(
        self,
        tracer: trace.Tracer,
        propagator: Optional[TextMapPropagator] = None,
    ) -> None:
        """
        Args:
            tracer: Tracer used for every span started by this service
            propagator: Header propagator (defaults to W3C trace context)
        """
        self.tracer = tracer
        self.propagator = propagator or TraceContextTextMapPropagator()

    @classmethod
    def from_provider(cls, provider: TracerProvider, name: str) -> "TracePropagation":
        return cls(provider.get_tracer(name))

    def extract(self, headers: Mapping[str, str]) -> Context:
        """Read the inbound trace context from request headers.

        Args:
            headers: Inbound request headers

        Returns:
            Context holding the remote parent span, or an empty context
        """
        return self.propagator.extract(carrier=headers)

    def inject(self, headers: Optional[MutableMapping[str, str]] = None) -> dict:
        """Build outbound headers carrying the active trace context.

        Args:
            headers: Headers to copy before injecting

        Returns:
            New header dict including ``traceparent``
        """
        carrier = dict(headers or {})
        self.propagator.inject(carrier)
        return carrier

    @contextmanager
    def span(
        self,
        name: str,
        context: Optional[Context] = None,
        **attributes: Any,
    ) -> Iterator[trace.Span]:
        """Start a span as the current span for the enclosed block.

        The span is ended once when the block exits, whether it returns or
        raises. Exceptions are recorded on the span and re-raised.

        Args:
            name: Span name
            context: Parent context (defaults to the current context)
            **attributes: Span attributes

        Yields:
            Active span
        """
        with self.tracer.start_as_current_span(
            name,
            context=context,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            for key, value in attributes.items():
                span.set_attribute(key, value)
            try:
                yield span
            except Exception as exc:
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                raise
