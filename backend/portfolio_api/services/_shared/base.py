from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pymongo.errors import PyMongoError

from portfolio_api.core import errors as api_errors
from portfolio_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidIdentifierError,
    InvalidPayloadError,
    NotFoundError,
    ServiceError,
    StoreError,
)

log = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    """
    Carry request-scoped data for logging.

    :param request_id: Correlation id for logging/tracing.
    """

    request_id: str | None = None


def translate_exceptions(exc: Exception) -> Exception:
    """
    Map service-level errors to API-level (HTTP) errors.

    :param exc: Exception raised within a service.
    :returns: Translated exception ready to be rendered, or ``exc`` untouched.
    """
    if isinstance(exc, (InvalidIdentifierError, InvalidPayloadError)):
        return api_errors.BadRequest(str(exc))

    if isinstance(exc, NotFoundError):
        return api_errors.NotFound(str(exc))

    if isinstance(exc, ConflictError):
        return api_errors.Conflict(str(exc))

    if isinstance(exc, AuthenticationError):
        return api_errors.Unauthorized(str(exc))

    if isinstance(exc, StoreError):
        return api_errors.InternalError()

    # Any other ServiceError subclass -> 400 Bad Request
    if isinstance(exc, ServiceError):
        return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

    return exc


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request-scoped :class:`ServiceContext`.
    * Wrap driver failures into :class:`StoreError`.
    * Stamp service log records with the request id.

    Translation of service errors into HTTP errors lives in
    :func:`translate_exceptions`, applied by the central error handlers.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    def log_extra(self, **fields: Any) -> dict[str, Any]:
        """Build the ``extra=`` mapping for a service log record."""
        return {"request_id": self.ctx.request_id, **fields}

    @contextmanager
    def store_guard(self, operation: str) -> Iterator[None]:
        """
        Convert :class:`pymongo.errors.PyMongoError` raised inside the block
        into :class:`StoreError`.

        :param operation: Name reported in logs, e.g. ``"projects.update"``.
        """
        try:
            yield
        except PyMongoError as exc:
            log.error("store.failure", exc_info=True, extra=self.log_extra(operation=operation))
            raise StoreError(operation) from exc
