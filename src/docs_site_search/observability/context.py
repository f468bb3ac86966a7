"""Per-query correlation ids shared by log records and spans.

Every ``SiteSearch.search`` call starts a fresh trace so all log lines of one
query carry the same ``trace_id``. Spans opened inside a query replace the ids
with the OpenTelemetry ones, which lets log lines be joined with exported
spans.
"""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


trace_context: ContextVar[dict | None] = ContextVar("trace_context", default=None)

# Longest query text copied into the context
MAX_QUERY_LENGTH = 200


def _hex_id(length: int) -> str:
    return uuid4().hex[:length]


def get_trace_context() -> dict:
    """Return the current ids, creating a trace on first use."""
    ctx = trace_context.get()
    if not ctx or not ctx.get("trace_id"):
        ctx = {**(ctx or {}), "trace_id": _hex_id(32), "span_id": _hex_id(16)}
        trace_context.set(ctx)
    return ctx


def set_trace_context(trace_id: str, span_id: str, **extra: object) -> None:
    trace_context.set({"trace_id": trace_id, "span_id": span_id, **extra})


def start_query_trace(query: str) -> str:
    """Start a new trace for one search query and return its trace id."""
    trace_id = _hex_id(32)
    set_trace_context(trace_id, _hex_id(16), query=query[:MAX_QUERY_LENGTH])
    return trace_id


def bind_span(trace_id: str, span_id: str) -> None:
    """Adopt the ids of an active span, keeping any other context fields."""
    ctx = trace_context.get() or {}
    trace_context.set({**ctx, "trace_id": trace_id, "span_id": span_id})
