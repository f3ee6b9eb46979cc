"""Blueprint factory shared by the document collections.

Each collection exposes the same handler shapes under its own (historical)
paths. A path left as ``None`` means the operation is not exposed.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import Blueprint

from portfolio_api.api.deps import (
    json_response,
    read_json_body,
    require_admin_for_writes,
    service_context,
    timing,
)
from portfolio_api.core.extensions import get_database
from portfolio_api.repositories import BaseRepository
from portfolio_api.services import DocumentService


@dataclass(frozen=True)
class CollectionRoutes:
    """
    Routing table for one collection.

    :param name: Blueprint name.
    :param entity: Display name (``"Project"``).
    :param repository: Repository class bound to the collection.
    :param id_key: Response key carrying the new id on create.
    :param item_key: Response key carrying the document on update.
    :param create_message: Message returned on create.
    :param guard_writes: Whether mutations honour ``REQUIRE_ADMIN_FOR_WRITES``.
    """

    name: str
    entity: str
    repository: type[BaseRepository]
    id_key: str
    create_path: str
    list_path: str
    create_message: str
    item_key: str | None = None
    get_path: str | None = None
    update_path: str | None = None
    delete_path: str | None = None
    guard_writes: bool = True


def build_blueprint(routes: CollectionRoutes) -> Blueprint:
    """Create the blueprint serving ``routes``."""

    bp = Blueprint(routes.name, __name__)
    write_guard = require_admin_for_writes if routes.guard_writes else (lambda f: f)

    def service() -> DocumentService:
        return DocumentService(
            routes.repository(get_database()),
            entity=routes.entity,
            ctx=service_context(),
        )

    @bp.post(routes.create_path)
    @timing
    @write_guard
    def create_document():
        created = service().create(read_json_body())
        return json_response(
            {
                "message": routes.create_message,
                routes.id_key: created.id,
                "timestamp": created.timestamp,
            },
            status=201,
        )

    @bp.get(routes.list_path)
    @timing
    def list_documents():
        return json_response(service().list())

    if routes.get_path:

        @bp.get(routes.get_path)
        @timing
        def get_document(doc_id: str):
            return json_response(service().get(doc_id))

    if routes.update_path:

        @bp.put(routes.update_path)
        @timing
        @write_guard
        def update_document(doc_id: str):
            document = service().update(doc_id, read_json_body())
            return json_response(
                {
                    "message": f"{routes.entity} updated successfully",
                    routes.item_key or routes.entity.lower(): document,
                }
            )

    if routes.delete_path:

        @bp.delete(routes.delete_path)
        @timing
        @write_guard
        def delete_document(doc_id: str):
            service().delete(doc_id)
            return json_response({"message": f"{routes.entity} deleted successfully"})

    return bp
