"""Unit tests for BSON-aware JSON serialization."""

from __future__ import annotations

from datetime import datetime, timezone

from bson import ObjectId

from portfolio_api.core.json import isoformat_utc


def test_isoformat_utc_uses_milliseconds_and_z_suffix() -> None:
    value = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)

    assert isoformat_utc(value) == "2024-05-01T12:30:15.123Z"


def test_isoformat_utc_treats_naive_values_as_utc() -> None:
    assert isoformat_utc(datetime(2024, 5, 1)) == "2024-05-01T00:00:00.000Z"


def test_app_json_renders_object_ids_and_datetimes(app) -> None:
    oid = ObjectId()
    doc = {"_id": oid, "timestamp": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)}

    rendered = app.json.loads(app.json.dumps(doc))

    assert rendered == {"_id": str(oid), "timestamp": "2024-01-02T03:04:05.000Z"}
