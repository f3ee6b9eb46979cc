"""Repositories for the free-form document collections."""

from __future__ import annotations

from portfolio_api.repositories.base import BaseRepository


class ProjectRepository(BaseRepository):
    """Portfolio projects."""

    collection_name = "projects"


class BlogRepository(BaseRepository):
    """Blog posts."""

    collection_name = "blogs"


class ContactRepository(BaseRepository):
    """Contact form submissions (append-only at the API level)."""

    collection_name = "contact"
