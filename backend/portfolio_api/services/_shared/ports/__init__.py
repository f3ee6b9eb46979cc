"""
portfolio_api.services._shared.ports
====================================

*Ports* (hexagonal interfaces) for the credential infrastructure.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for signing access tokens.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`, the abstraction for hashing and verifying
    passwords.

Concrete adapters live under ``portfolio_api.infra``.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_provider import StubTokenProvider, TokenProvider

__all__ = [
    "PasswordHasher",
    "TokenProvider",
    "StubTokenProvider",
]
