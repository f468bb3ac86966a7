"""OpenTelemetry spans around index builds and queries.

Without ``init_tracing`` spans go to the global tracer provider, which is a
no-op unless the host application installed one.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.trace import Status, StatusCode

from docs_site_search.observability.context import bind_span


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

TRACER_NAME = "docs_site_search"

_state: dict[str, Tracer | None] = {"tracer": None}


def init_tracing(
    service_name: str = "docs-site-search",
    resource_attributes: dict[str, str] | None = None,
    span_processors: Sequence[SpanProcessor] = (),
) -> TracerProvider:
    """Create an SDK tracer provider, register it globally and use it for spans.

    Span processors (exporters) are supplied by the caller. The provider is
    used by ``create_span`` even when a global provider was already set.
    """
    provider = TracerProvider(resource=Resource.create({"service.name": service_name, **(resource_attributes or {})}))
    for processor in span_processors:
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    _state["tracer"] = provider.get_tracer(TRACER_NAME)
    logger.info("Tracing initialized for %s with %d span processor(s)", service_name, len(span_processors))
    return provider


def get_tracer() -> Tracer:
    tracer = _state["tracer"]
    if tracer is None:
        tracer = _state["tracer"] = trace.get_tracer(TRACER_NAME)
    return tracer


@contextmanager
def create_span(name: str, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
    """Run the body inside an internal span.

    The span's ids are bound to the logging context. An exception marks the
    span as failed, is recorded on it and propagates unchanged.
    """
    with get_tracer().start_as_current_span(
        name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        span_context = span.get_span_context()
        if span_context.is_valid:
            bind_span(format(span_context.trace_id, "032x"), format(span_context.span_id, "016x"))
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            raise
