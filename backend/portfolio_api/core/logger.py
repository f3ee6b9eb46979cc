"""JSON logging to stdout with per-request correlation ids."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

# ``extra=`` keys copied verbatim into the JSON payload when present
EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "collection",
    "document_id",
    "operation",
    "method",
    "path",
    "status",
)


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - formatting logic
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp records with the current ``request_id``.

    An id passed explicitly through ``extra=`` (services carry one in their
    context) is kept; otherwise the request's id is used, ``None`` outside
    requests.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Return the correlation id of the current request, creating it on first use.

    The id is read from ``X-Request-ID`` or ``X-Correlation-ID`` and falls back
    to a random UUID4. It is cached on :data:`flask.g` for the request lifetime.
    """
    if not has_request_context():
        return str(uuid4())
    cached = g.get("request_id")
    if cached:
        return str(cached)
    request_id = next(
        (request.headers[h] for h in CORRELATION_HEADERS if request.headers.get(h)),
        str(uuid4()),
    )
    g.request_id = request_id
    return request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single JSON stdout handler on the root logger."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    root.setLevel(level)


def init_app(app: Flask) -> None:
    """Seed request ids, echo them in ``X-Request-ID`` and log one line per request."""

    app.logger.addFilter(RequestIdFilter())
    access_log = logging.getLogger("portfolio_api.access")

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        access_log.info(
            "request.completed",
            extra={
                "request_id": ensure_request_id(),
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
            },
        )
        return response


__all__ = ["configure_logging", "init_app", "ensure_request_id", "JSONFormatter", "RequestIdFilter"]
