"""Observability module for tracing, metrics, and structured logging."""

from docs_site_search.observability.context import (
    bind_span,
    get_trace_context,
    set_trace_context,
    start_query_trace,
    trace_context,
)
from docs_site_search.observability.logging import JsonFormatter, configure_logging
from docs_site_search.observability.metrics import (
    INDEX_BUILD_LATENCY,
    INDEX_DOC_COUNT,
    SEARCH_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from docs_site_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "INDEX_BUILD_LATENCY",
    "INDEX_DOC_COUNT",
    "SEARCH_LATENCY",
    "JsonFormatter",
    "bind_span",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "start_query_trace",
    "trace_context",
    "track_latency",
]
