"""Concrete adapters for the service-layer ports."""

from __future__ import annotations

from .jwt.flask_jwt_token_provider import JWTTokenProvider
from .security.werkzeug_password_hasher import WerkzeugPasswordHasher

__all__ = ["JWTTokenProvider", "WerkzeugPasswordHasher"]
