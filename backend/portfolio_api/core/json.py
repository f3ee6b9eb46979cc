"""Flask JSON provider aware of BSON values returned by the document store."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from bson import ObjectId
from flask.json.provider import DefaultJSONProvider


def isoformat_utc(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are treated as UTC, which is how the store hands them back.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DocumentJSONProvider(DefaultJSONProvider):
    """Serialize ``ObjectId`` as hex strings and datetimes as ISO-8601 UTC."""

    sort_keys = False

    @staticmethod
    def default(o: Any) -> Any:
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, datetime):
            return isoformat_utc(o)
        if isinstance(o, date):
            return o.isoformat()
        return DefaultJSONProvider.default(o)
