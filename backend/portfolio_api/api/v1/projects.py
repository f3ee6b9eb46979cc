"""Project endpoints."""

from __future__ import annotations

from portfolio_api.api.v1.collections import CollectionRoutes, build_blueprint
from portfolio_api.repositories import ProjectRepository

ROUTES = CollectionRoutes(
    name="projects",
    entity="Project",
    repository=ProjectRepository,
    id_key="projectId",
    item_key="project",
    create_message="Project created successfully!",
    create_path="/create-project",
    list_path="/projects",
    get_path="/projects/<doc_id>",
    update_path="/update-project/<doc_id>",
    delete_path="/projects/<doc_id>",
)

bp = build_blueprint(ROUTES)
