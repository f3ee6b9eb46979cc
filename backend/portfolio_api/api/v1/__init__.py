"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .auth import bp as auth_bp  # noqa: E402
from .blogs import bp as blogs_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .messages import bp as messages_bp  # noqa: E402
from .projects import bp as projects_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version). The public paths
# are flat (``/api/v1/create-project``, ``/api/v1/blogs``), so every
# blueprint mounts at the version root.
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),
    (auth_bp, ""),
    (projects_bp, ""),
    (blogs_bp, ""),
    (messages_bp, ""),
]
