"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from werkzeug.exceptions import BadRequest

from portfolio_api.core.errors import Forbidden
from portfolio_api.core.extensions import get_database
from portfolio_api.core.logger import ensure_request_id
from portfolio_api.infra import JWTTokenProvider, WerkzeugPasswordHasher
from portfolio_api.repositories import ROLE_ADMIN, AccountRepository
from portfolio_api.services import AuthService, AuthTokenConfig, ServiceContext
from portfolio_api.services._shared.errors import InvalidPayloadError

F = TypeVar("F", bound=Callable[..., Any])


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response with an explicit status code."""

    response = jsonify(payload)
    response.status_code = status
    return response


def read_json_body() -> Any:
    """Return the parsed JSON body.

    An empty body reads as ``{}``. A body that is not valid JSON raises
    :class:`InvalidPayloadError`; valid JSON is returned as is (``null``
    included) and shape checks are left to the caller.
    """

    if not request.get_data(cache=True).strip():
        return {}
    try:
        return request.get_json(force=True)
    except BadRequest:
        raise InvalidPayloadError("Malformed JSON body") from None


def service_context() -> ServiceContext:
    """Request-scoped context handed to every service."""

    return ServiceContext(request_id=ensure_request_id())


def build_auth_service() -> AuthService:
    """Wire :class:`AuthService` to the current app's store and settings."""

    cfg = current_app.config
    return AuthService(
        accounts=AccountRepository(get_database()),
        token_provider=JWTTokenProvider(),
        hasher=WerkzeugPasswordHasher(method=cfg.get("PASSWORD_HASH_METHOD", "scrypt")),
        token_cfg=AuthTokenConfig(access_expires=cfg.get("JWT_ACCESS_TOKEN_EXPIRES")),
        ctx=service_context(),
    )


def require_admin_for_writes(func: F) -> F:
    """Demand an admin token when ``REQUIRE_ADMIN_FOR_WRITES`` is enabled.

    Disabled by default: issued tokens are then never checked.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        if current_app.config.get("REQUIRE_ADMIN_FOR_WRITES"):
            verify_jwt_in_request(optional=False)
            claims = get_jwt() or {}
            if claims.get("role") != ROLE_ADMIN:
                raise Forbidden("Admin role required")
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={
                    "endpoint": request.endpoint,
                    "method": request.method,
                    "elapsed_ms": round(elapsed_ms, 2),
                },
            )

    return wrapper  # type: ignore[return-value]
