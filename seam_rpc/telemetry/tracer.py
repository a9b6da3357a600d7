"""
OpenTelemetry Trace Context Management

Carries trace context across the transport so a request handled by a server is
traced as a child of the client call that sent it.
"""

import contextvars
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, ContextManager, Dict, Optional

from opentelemetry import trace
from opentelemetry.context import attach, detach
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

logger = logging.getLogger(__name__)


@dataclass
class TraceContext:
    """Wire form of a span context"""
    trace_id: str = ""
    span_id: str = ""
    sampled: bool = True
    baggage: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "span_id": self.span_id,
            "sampled": self.sampled,
            "baggage": dict(self.baggage),
        }


# Context variable for current trace context
current_trace_context = contextvars.ContextVar('current_trace_context', default=None)


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address

    Returns:
        Tracer for the service
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return trace.get_tracer(service_name)


def get_current_trace_context() -> Optional[TraceContext]:
    """Get the TraceContext of the active span

    Falls back to the context last extracted from a request when no span is
    active.
    """
    span_context = trace.get_current_span().get_span_context()

    if not span_context.is_valid:
        return current_trace_context.get()

    trace_context = TraceContext(
        trace_id=span_context.trace_id.to_bytes(16, byteorder='big').hex(),
        span_id=span_context.span_id.to_bytes(8, byteorder='big').hex(),
        sampled=span_context.trace_flags.sampled,
    )
    current_trace_context.set(trace_context)

    return trace_context


def inject_trace_context() -> Optional[Dict[str, Any]]:
    """Current trace context as a transportable dictionary, or None"""
    trace_context = get_current_trace_context()
    if trace_context is None:
        return None
    return trace_context.to_dict()


def extract_trace_context(trace_context_dict: Dict[str, Any]) -> Optional[TraceContext]:
    """Extract TraceContext from a request's ``trace_context`` member

    Args:
        trace_context_dict: Dictionary containing trace_id, span_id etc.

    Returns:
        TraceContext, or None when nothing usable was sent
    """
    if not trace_context_dict or not isinstance(trace_context_dict, dict):
        return None

    trace_context = TraceContext(
        trace_id=str(trace_context_dict.get('trace_id', '')),
        span_id=str(trace_context_dict.get('span_id', '')),
        sampled=bool(trace_context_dict.get('sampled', True)),
    )

    baggage = trace_context_dict.get('baggage')
    if isinstance(baggage, dict):
        for key, value in baggage.items():
            trace_context.baggage[key] = str(value)

    return trace_context


@contextmanager
def with_trace_context(trace_context: Optional[TraceContext]) -> ContextManager[None]:
    """Use specified TraceContext as current context

    Args:
        trace_context: TraceContext object

    Yields:
        None, used as context manager
    """
    if not trace_context:
        yield
        return

    old_trace_context = current_trace_context.get()
    token = None

    try:
        current_trace_context.set(trace_context)

        if trace_context.trace_id and trace_context.span_id:
            try:
                span_context = trace.SpanContext(
                    trace_id=int(trace_context.trace_id, 16),
                    span_id=int(trace_context.span_id, 16),
                    is_remote=True,
                    trace_flags=trace.TraceFlags(0x01 if trace_context.sampled else 0x00)
                )
            except ValueError:
                logger.debug(f"Ignoring malformed trace context: {trace_context}")
            else:
                token = attach(trace.set_span_in_context(trace.NonRecordingSpan(span_context)))

        yield
    finally:
        if token is not None:
            detach(token)
        current_trace_context.set(old_trace_context)


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Span context manager
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.INTERNAL,
    )
