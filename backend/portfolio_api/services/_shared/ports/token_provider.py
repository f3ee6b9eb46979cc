from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Protocol


class TokenProvider(Protocol):
    """Port for issuing and decoding signed access tokens."""

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def decode(self, token: str) -> dict[str, Any]: ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests."""

    def __init__(self) -> None:
        self._now = datetime.now(tz=timezone.utc)
        self._seq = 0
        self._issued: dict[str, dict[str, Any]] = {}

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        self._seq += 1
        token = f"access.{identity}.{self._seq}"
        payload: dict[str, Any] = {
            "sub": identity,
            "type": "access",
            "exp": int((self._now + (expires_delta or timedelta(hours=1))).timestamp()),
        }
        if additional_claims:
            payload.update(additional_claims)
        self._issued[token] = payload
        return token

    def decode(self, token: str) -> dict[str, Any]:
        return self._issued[token]
