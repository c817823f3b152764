"""Unit tests for structured logging processors."""

from shared.logging import add_trace_context


class TestTraceContextProcessor:
    """Test trace ids added to log events."""

    def test_adds_ids_inside_span(self, front_tracing):
        with front_tracing.span("handleCEPRequest") as span:
            event = add_trace_context(None, "info", {"event": "cep_request_received"})
            context = span.get_span_context()

        assert event["trace_id"] == format(context.trace_id, "032x")
        assert event["span_id"] == format(context.span_id, "016x")

    def test_no_ids_outside_span(self):
        event = add_trace_context(None, "info", {"event": "starting_server"})

        assert event == {"event": "starting_server"}
