"""Contact form endpoints: submit and list, nothing else."""

from __future__ import annotations

from portfolio_api.api.v1.collections import CollectionRoutes, build_blueprint
from portfolio_api.repositories import ContactRepository

ROUTES = CollectionRoutes(
    name="messages",
    entity="Message",
    repository=ContactRepository,
    # Clients read the new id from ``blogId``
    id_key="blogId",
    create_message="Form submitted successfully",
    create_path="/save-contact",
    list_path="/messages",
    guard_writes=False,
)

bp = build_blueprint(ROUTES)
