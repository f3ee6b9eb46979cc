"""Liveness and health check endpoints."""

from __future__ import annotations

from flask import Blueprint, current_app

from portfolio_api.api.deps import json_response, timing
from portfolio_api.core.extensions import get_database
from portfolio_api.services.documents.service import utcnow

bp = Blueprint("health", __name__)

# Mounted at the application root, outside the versioned prefix
root_bp = Blueprint("root", __name__)


@root_bp.get("/")
def liveness():
    """Report that the process is serving requests."""

    return json_response({"message": "Server is running smoothly", "timestamp": utcnow()})


@bp.get("/health")
@timing
def healthcheck():
    """Return application and database health information."""

    db_status = "ok"
    try:
        get_database().command("ping")
    except Exception:  # pragma: no cover - depends on store availability
        current_app.logger.exception("healthcheck.db_error")
        db_status = "fail"
    return json_response({"status": "ok", "db": db_status})
