"""Structured JSON logging correlated with the current query trace."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
import sys
from typing import IO, Any

import orjson

from docs_site_search.observability.context import get_trace_context


# Attributes every LogRecord carries; anything else was passed via ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

SENSITIVE_KEYS = frozenset({"authorization", "cookie", "password", "secret", "token"})
REDACTED = "[REDACTED]"


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, trace ids and extras.

    The query text of the active trace, when there is one, is added as
    ``query``. Values of keys in ``SENSITIVE_KEYS`` are replaced and long
    strings are clipped.
    """

    MAX_MESSAGE_LEN = 2000
    MAX_FIELD_LEN = 500

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_trace_context()
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "component": record.name.rsplit(".", 1)[-1],
            "message": _clip(record.getMessage(), self.MAX_MESSAGE_LEN),
            "trace_id": ctx.get("trace_id", ""),
            "span_id": ctx.get("span_id", ""),
        }
        if ctx.get("query"):
            entry["query"] = ctx["query"]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            if key.lower() in SENSITIVE_KEYS:
                entry[key] = REDACTED
            elif isinstance(value, str):
                entry[key] = _clip(value, self.MAX_FIELD_LEN)
            else:
                entry[key] = value

        return orjson.dumps(entry, default=_to_json).decode("utf-8")


def _to_json(value: Any) -> Any:
    """Fallback for values orjson cannot serialize natively."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (Path, Exception)):
        return str(value)
    return repr(value)


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    *,
    logger_levels: dict[str, str] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Install a single root handler.

    Args:
        level: Root log level name, case-insensitive
        json_output: Use ``JsonFormatter`` when True, a plain text line otherwise
        logger_levels: Per-logger level overrides (logger name -> level name)
        stream: Output stream, stderr by default so stdout stays free for results
    """
    root = logging.getLogger()
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_output else logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    root.addHandler(handler)

    for logger_name, logger_level in (logger_levels or {}).items():
        logging.getLogger(logger_name).setLevel(logger_level.upper())
