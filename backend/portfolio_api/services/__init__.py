"""Service layer public API.

Re-exports
----------
- Base primitives (from ``portfolio_api.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Credential service (from ``portfolio_api.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`RegisterIn`, :class:`LoginIn`, :class:`TokenOut`,
      :class:`AuthTokenConfig`

- Collection service (from ``portfolio_api.services.documents``)
    * :class:`DocumentService`
    * DTO: :class:`CreatedOut`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from .auth import AuthService, AuthTokenConfig, LoginIn, RegisterIn, TokenOut
from .documents import CreatedOut, DocumentService

__all__ = [
    "BaseService",
    "ServiceContext",
    "AuthService",
    "AuthTokenConfig",
    "LoginIn",
    "RegisterIn",
    "TokenOut",
    "DocumentService",
    "CreatedOut",
]
