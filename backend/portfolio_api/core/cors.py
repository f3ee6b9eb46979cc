"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def init_app(app: Flask) -> None:
    """Allow cross-origin calls to every route.

    ``CORS_ORIGINS`` holds a comma-separated allow-list; blank or ``"*"``
    allows any origin without credentials, matching a browser front-end
    served from a different host.
    """
    origins = [o.strip() for o in app.config.get("CORS_ORIGINS", "*").split(",") if o.strip()]
    any_origin = not origins or origins == ["*"]

    CORS(
        app,
        origins="*" if any_origin else origins,
        supports_credentials=not any_origin,
        max_age=app.config.get("CORS_MAX_AGE"),
    )
