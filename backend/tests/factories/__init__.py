"""Factory Boy builders for request payloads and stored documents."""

from __future__ import annotations

from tests.factories.documents import (
    AccountPayloadFactory,
    BlogPayloadFactory,
    ContactPayloadFactory,
    ProjectPayloadFactory,
)

__all__ = [
    "AccountPayloadFactory",
    "BlogPayloadFactory",
    "ContactPayloadFactory",
    "ProjectPayloadFactory",
]
