"""Blog post endpoints.

Deletion lives under the singular ``/blog/<id>`` while reads use ``/blogs``;
existing clients depend on both.
"""

from __future__ import annotations

from portfolio_api.api.v1.collections import CollectionRoutes, build_blueprint
from portfolio_api.repositories import BlogRepository

ROUTES = CollectionRoutes(
    name="blogs",
    entity="Blog",
    repository=BlogRepository,
    id_key="blogId",
    item_key="blog",
    create_message="Blog created successfully!",
    create_path="/create-blog",
    list_path="/blogs",
    get_path="/blogs/<doc_id>",
    update_path="/update-blog/<doc_id>",
    delete_path="/blog/<doc_id>",
)

bp = build_blueprint(ROUTES)
