"""Conversion of client-supplied identifiers into store identifiers."""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from portfolio_api.services._shared.errors import InvalidIdentifierError


def parse_object_id(raw: Any, *, label: str) -> ObjectId:
    """Parse ``raw`` into an :class:`~bson.ObjectId`.

    Only 24-character hexadecimal strings are accepted; ``ObjectId.is_valid``
    would also take 12-byte values, which never come from a URL.

    :param raw: Path parameter as received from the client.
    :param label: Entity label used in the error message (``"project"``).
    :returns: Parsed identifier.
    :raises InvalidIdentifierError: If ``raw`` is malformed.
    """
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise InvalidIdentifierError(label=label, raw=str(raw))
    return ObjectId(raw)
