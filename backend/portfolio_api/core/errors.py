"""Centralized JSON error handling for the API.

Every failure leaving a handler is rendered as::

    {"success": false, "message": "...", "code": "...", "status": 404,
     "request_id": "..."}

so clients can always rely on a ``message`` field.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from flask_jwt_extended import JWTManager
from marshmallow import ValidationError as MarshmallowValidationError
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from portfolio_api.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        500: "internal_server_error",
        503: "service_unavailable",
    }
    return mapping.get(status_code, "error")


def error_body(
    *,
    status: int,
    code: str,
    message: str,
    errors: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the JSON error envelope.

    :param status: HTTP status code.
    :param code: Stable machine-consumable error code.
    :param message: Human-readable error summary (safe for clients).
    :param errors: Optional per-field validation messages.
    :returns: Error dictionary.
    :rtype: dict
    """
    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "code": code,
        "status": int(status),
    }
    if errors:
        body["errors"] = errors
    body["request_id"] = ensure_request_id()
    return body


def error_response(body: dict[str, Any]) -> tuple[Response, int]:
    """Return ``(response, status)`` for an envelope built by :func:`error_body`."""
    return jsonify(body), int(body["status"])


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier, typically snake_case. Defaults to
        ``"bad_request"``.
    errors : dict[str, Any] | None, optional
        Optional structured payload (e.g., validation messages).
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        errors: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.errors = errors or {}

    def to_body(self) -> dict[str, Any]:
        """Serialize error metadata into the JSON envelope."""
        return error_body(
            status=self.status_code,
            code=self.code,
            message=self.message,
            errors=self.errors or None,
        )


# Domain conveniences
class BadRequest(APIError):
    """400 for malformed identifiers or request bodies."""

    def __init__(self, message: str = "Bad request", errors: dict[str, Any] | None = None) -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="bad_request", errors=errors)


class NotFound(APIError):
    """404 when documents are missing."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND, code="not_found")


class Conflict(APIError):
    """400 for uniqueness collisions (the public contract reports them as bad requests)."""

    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="conflict")


class Unauthorized(APIError):
    """401 when authentication fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code="unauthorized")


class Forbidden(APIError):
    """403 when the token's role is not allowed."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=HTTPStatus.FORBIDDEN, code="forbidden")


class InternalError(APIError):
    """500 for store failures and other server-side problems."""

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="internal_server_error",
        )


def register_jwt_callbacks(jwt: JWTManager) -> None:
    """Render ``flask-jwt-extended`` failures with the shared error envelope."""

    def _unauthorized(message: str) -> tuple[Response, int]:
        log.warning("JWTError: msg=%s", message)
        return error_response(
            error_body(status=HTTPStatus.UNAUTHORIZED, code="unauthorized", message=message)
        )

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return _unauthorized(reason)

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        return _unauthorized(reason)

    @jwt.expired_token_loader
    def _expired_token(_header: dict[str, Any], _payload: dict[str, Any]):
        return _unauthorized("Token has expired")


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Service-layer errors are translated through
      :func:`portfolio_api.services._shared.base.translate_exceptions`.
    - 5xx are logged with ``exc_info``; 4xx as warnings.
    """
    from portfolio_api.services._shared.base import translate_exceptions
    from portfolio_api.services._shared.errors import ServiceError

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        body = err.to_body()
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s",
            err.code,
            err.status_code,
            err.message,
        )
        return error_response(body)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        translated = translate_exceptions(err)
        if isinstance(translated, APIError):
            return handle_api_error(translated)
        return handle_unexpected_error(err)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        error_code = _http_status_to_code(status)
        message = (err.description or error_code.replace("_", " ").capitalize()).strip()
        if status == HTTPStatus.NOT_FOUND:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level("HTTPException: code=%s status=%s detail=%s", error_code, status, message)
        return error_response(error_body(status=status, code=error_code, message=message))

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        log.warning("ValidationError: fields=%s", sorted(messages))
        return error_response(
            error_body(
                status=HTTPStatus.BAD_REQUEST,
                code="validation_error",
                message="Validation failed",
                errors=messages,
            )
        )

    @app.errorhandler(PyMongoError)
    def handle_store_error(err: PyMongoError):
        # Never leak driver details to clients
        log.error("StoreError: %s", type(err).__name__, exc_info=True)
        return error_response(InternalError().to_body())

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception", exc_info=err)
        return error_response(InternalError().to_body())
