from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bson import ObjectId


@dataclass(frozen=True)
class CreatedOut:
    """
    Result of inserting a document.

    :param id: Store-assigned identifier.
    :param timestamp: Creation time stamped on the document (UTC).
    """

    id: ObjectId
    timestamp: datetime
