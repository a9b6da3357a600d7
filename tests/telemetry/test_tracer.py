"""
Tests for trace context propagation helpers
"""
from seam_rpc.telemetry.tracer import (
    TraceContext,
    create_span,
    current_trace_context,
    extract_trace_context,
    with_trace_context
)

TRACE_ID = "0af7651916cd43dd8448eb211c80319c"
SPAN_ID = "b7ad6b7169203331"


class TestExtractTraceContext:
    """Test trace context extraction from requests"""

    def test_extract(self):
        trace_context = extract_trace_context({
            "trace_id": TRACE_ID,
            "span_id": SPAN_ID,
            "sampled": False,
            "baggage": {"tenant": 7}
        })

        assert trace_context == TraceContext(TRACE_ID, SPAN_ID, False, {"tenant": "7"})

    def test_extract_nothing(self):
        assert extract_trace_context(None) is None
        assert extract_trace_context({}) is None
        assert extract_trace_context("garbage") is None

    def test_round_trip_dict(self):
        trace_context = TraceContext(TRACE_ID, SPAN_ID)

        assert extract_trace_context(trace_context.to_dict()) == trace_context


class TestWithTraceContext:
    """Test scoped trace context"""

    def test_sets_and_restores(self):
        trace_context = TraceContext(TRACE_ID, SPAN_ID)

        assert current_trace_context.get() is None
        with with_trace_context(trace_context):
            assert current_trace_context.get() is trace_context
        assert current_trace_context.get() is None

    def test_malformed_ids_tolerated(self):
        trace_context = TraceContext("not-hex", "also-not-hex")

        with with_trace_context(trace_context):
            assert current_trace_context.get() is trace_context
        assert current_trace_context.get() is None

    def test_none_is_noop(self):
        with with_trace_context(None):
            assert current_trace_context.get() is None


def test_create_span_without_provider():
    with create_span("rpc.test", {"rpc.method": "test"}):
        pass
