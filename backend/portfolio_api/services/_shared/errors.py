"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic**: they never import Flask or HTTP
helpers. The translation to HTTP responses happens in
``portfolio_api/core/errors.py`` via
:func:`portfolio_api.services._shared.base.translate_exceptions`.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Unknown subclasses are reported to clients as ``400 Bad Request``.
    """


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(eq=False)
class InvalidIdentifierError(ServiceError):
    """
    Raised when a client-supplied identifier is not a valid ``ObjectId``.

    :param label: Lowercase entity label used in the message (e.g. "project").
    :param raw: Offending value.
    """

    label: str
    raw: str

    def __str__(self) -> str:
        return f"Invalid {self.label} ID"


@dataclass(eq=False)
class NotFoundError(ServiceError):
    """
    Raised when a document is not found in its collection.

    :param entity: Entity name (e.g., "Project").
    :param key: Identifier that was looked up.
    """

    entity: str
    key: str

    def __str__(self) -> str:
        return f"{self.entity} not found"


@dataclass(eq=False)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule is violated (e.g. email already registered).

    :param entity: Entity name (e.g., "Account").
    :param detail: Client-facing explanation.
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class AuthenticationError(ServiceError):
    """
    Raised for any failed login.

    Unknown email and wrong password share this exact error so callers cannot
    tell them apart.
    """

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class InvalidPayloadError(ServiceError):
    """Raised when a request body is not a JSON object."""

    def __init__(self, message: str = "Request body must be a JSON object") -> None:
        super().__init__(message)


@dataclass(eq=False)
class StoreError(ServiceError):
    """
    Raised when the document store fails (unreachable, write errors, ...).

    :param operation: Short operation name, e.g. ``"projects.create"``.
    """

    operation: str

    def __str__(self) -> str:
        return f"Store failure during {self.operation}"
