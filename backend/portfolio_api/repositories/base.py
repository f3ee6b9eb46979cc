"""Generic repository base over a single MongoDB collection.

Repositories stay thin and persistence-focused:

* They never raise HTTP errors nor implement use cases; services decide what
  a missing document means.
* They accept already-parsed :class:`bson.ObjectId` values. Turning client
  strings into identifiers happens before a repository is ever reached.
* They never mutate the mappings they are given.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

Document = dict[str, Any]


class BaseRepository:
    """Persistence-only CRUD for one collection.

    Subclasses MUST define ``collection_name``.
    """

    collection_name: ClassVar[str]

    def __init__(self, database: Database) -> None:
        self.collection: Collection = database[self.collection_name]

    # ------------------------------ Reads ---------------------------------

    def find_all(self) -> list[Document]:
        """Return every document in store-native order."""
        return list(self.collection.find())

    def find_by_id(self, oid: ObjectId) -> Document | None:
        """Return the document addressed by ``oid`` or ``None``."""
        return self.collection.find_one({"_id": oid})

    # ------------------------------ Writes --------------------------------

    def insert(self, document: Mapping[str, Any]) -> ObjectId:
        """Insert a copy of ``document`` and return the store-assigned id."""
        result = self.collection.insert_one(dict(document))
        return result.inserted_id

    def update_fields(self, oid: ObjectId, fields: Mapping[str, Any]) -> Document | None:
        """Merge ``fields`` into the stored document (``$set``).

        :returns: The post-update document, or ``None`` when nothing matched.
        """
        return self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": dict(fields)},
            return_document=ReturnDocument.AFTER,
        )

    def delete_by_id(self, oid: ObjectId) -> bool:
        """Delete the document addressed by ``oid``; ``False`` when absent."""
        return self.collection.delete_one({"_id": oid}).deleted_count > 0
