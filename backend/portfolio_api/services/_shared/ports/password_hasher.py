from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    Port for one-way, salted password hashing.

    Implementations must be slow enough to resist brute force; the digest
    string carries its own salt and parameters.
    """

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, digest: str) -> bool: ...
