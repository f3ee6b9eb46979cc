# portfolio_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param username: Display name.
    :param email: Login email (normalized by the repository).
    :param password: Raw password (hashed before persistence).
    """

    username: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: Account email.
    :param password: Raw password (to be verified).
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True)
class TokenOut:
    """
    Output DTO for a successful login.

    :param access_token: Encoded access JWT, opaque to this service.
    :param email: Email embedded in the claims.
    :param role: Role embedded in the claims.
    """

    access_token: str
    email: str
    role: str


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime; ``None`` defers to the
        token provider's default.
    """

    access_expires: timedelta | None = None
