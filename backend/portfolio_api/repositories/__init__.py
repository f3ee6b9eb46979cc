"""Repository package exposing persistence-layer access for every collection."""

from __future__ import annotations

from portfolio_api.repositories.account import (
    ROLE_ADMIN,
    ROLE_USER,
    AccountRepository,
    normalize_email,
)
from portfolio_api.repositories.base import BaseRepository, Document
from portfolio_api.repositories.documents import (
    BlogRepository,
    ContactRepository,
    ProjectRepository,
)

__all__ = [
    # Base
    "BaseRepository",
    "Document",
    # Accounts
    "AccountRepository",
    "ROLE_ADMIN",
    "ROLE_USER",
    "normalize_email",
    # Collections
    "ProjectRepository",
    "BlogRepository",
    "ContactRepository",
]
