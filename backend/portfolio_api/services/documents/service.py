"""
DocumentService
===============

Application service shared by the free-form collections (projects, blogs,
contact messages).

Responsibilities
----------------
- Stamp ``timestamp`` on creation; never touch it afterwards.
- Validate client identifiers before any store access.
- Turn "nothing matched" outcomes into :class:`NotFoundError`.

Notes
-----
- ``_id`` and ``timestamp`` are owned by the server: they are stripped from
  caller payloads on create and update.
- Which operations a collection exposes is decided by the HTTP layer; contact
  messages only get ``create`` and ``list``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from portfolio_api.repositories import BaseRepository, Document
from portfolio_api.services._shared.base import BaseService, ServiceContext
from portfolio_api.services._shared.errors import InvalidPayloadError, NotFoundError
from portfolio_api.services._shared.ids import parse_object_id
from portfolio_api.services.documents.dto import CreatedOut

log = logging.getLogger(__name__)

RESERVED_FIELDS = frozenset({"_id", "timestamp"})


def utcnow() -> datetime:
    """Current UTC time truncated to the store's millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def _caller_fields(payload: Any) -> dict[str, Any]:
    """Return the caller-owned fields of ``payload``.

    :raises InvalidPayloadError: If ``payload`` is not a mapping.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError()
    return {k: v for k, v in payload.items() if k not in RESERVED_FIELDS}


class DocumentService(BaseService):
    """
    CRUD orchestration for one collection.

    :param repo: Repository bound to the collection.
    :param entity: Display name used in messages (``"Project"``).
    """

    def __init__(
        self,
        repo: BaseRepository,
        *,
        entity: str,
        ctx: ServiceContext | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.repo = repo
        self.entity = entity
        self.label = entity.lower()
        self.collection = repo.collection_name

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create(self, payload: Mapping[str, Any]) -> CreatedOut:
        """
        Insert ``payload`` stamped with the current time.

        :raises InvalidPayloadError: If ``payload`` is not a JSON object.
        :raises StoreError: If the store rejects the write.
        """
        document = _caller_fields(payload)
        document["timestamp"] = utcnow()
        with self.store_guard(f"{self.collection}.create"):
            oid = self.repo.insert(document)
        log.info(
            "document.created",
            extra=self.log_extra(collection=self.collection, document_id=str(oid)),
        )
        return CreatedOut(id=oid, timestamp=document["timestamp"])

    def update(self, raw_id: str, payload: Mapping[str, Any]) -> Document:
        """
        Merge ``payload`` into the document addressed by ``raw_id``.

        Fields missing from ``payload`` are preserved. Existence is checked
        before the write and the write outcome is checked again, so a
        document deleted in between still yields :class:`NotFoundError`.

        :returns: The document as stored after the update.
        """
        oid = parse_object_id(raw_id, label=self.label)
        fields = _caller_fields(payload)
        with self.store_guard(f"{self.collection}.update"):
            current = self.repo.find_by_id(oid)
            if current is None:
                raise NotFoundError(self.entity, raw_id)
            if not fields:
                return current
            updated = self.repo.update_fields(oid, fields)
        if updated is None:
            raise NotFoundError(self.entity, raw_id)
        log.info(
            "document.updated",
            extra=self.log_extra(collection=self.collection, document_id=raw_id),
        )
        return updated

    def delete(self, raw_id: str) -> None:
        """
        Delete the document addressed by ``raw_id``.

        :raises NotFoundError: If nothing was deleted (already gone or never
            existed).
        """
        oid = parse_object_id(raw_id, label=self.label)
        with self.store_guard(f"{self.collection}.delete"):
            deleted = self.repo.delete_by_id(oid)
        if not deleted:
            raise NotFoundError(self.entity, raw_id)
        log.info(
            "document.deleted",
            extra=self.log_extra(collection=self.collection, document_id=raw_id),
        )

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list(self) -> list[Document]:
        """Return every document of the collection, unpaginated."""
        with self.store_guard(f"{self.collection}.list"):
            return self.repo.find_all()

    def get(self, raw_id: str) -> Document:
        """
        Return the document addressed by ``raw_id``.

        :raises InvalidIdentifierError: If ``raw_id`` is malformed.
        :raises NotFoundError: If no such document exists.
        """
        oid = parse_object_id(raw_id, label=self.label)
        with self.store_guard(f"{self.collection}.get"):
            document = self.repo.find_by_id(oid)
        if document is None:
            raise NotFoundError(self.entity, raw_id)
        return document
