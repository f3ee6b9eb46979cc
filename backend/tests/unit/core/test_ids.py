"""Unit tests for identifier parsing."""

from __future__ import annotations

import pytest
from bson import ObjectId

from portfolio_api.services._shared.errors import InvalidIdentifierError
from portfolio_api.services._shared.ids import parse_object_id


def test_parse_object_id_accepts_24_hex_chars() -> None:
    raw = "65f1c0ffee65f1c0ffee65f1"

    assert parse_object_id(raw, label="project") == ObjectId(raw)


@pytest.mark.parametrize("raw", ["", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", "65f1c0ffee65f1c0ffee65f", 123, None])
def test_parse_object_id_rejects_malformed_values(raw) -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        parse_object_id(raw, label="blog")

    assert str(excinfo.value) == "Invalid blog ID"

