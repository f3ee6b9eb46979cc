from __future__ import annotations

import logging
from dataclasses import dataclass

import bcrypt
from werkzeug.security import check_password_hash, generate_password_hash

from portfolio_api.services._shared.ports import PasswordHasher

log = logging.getLogger(__name__)

# Modular-crypt prefixes written by bcrypt implementations
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


@dataclass
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Salted password hashing backed by :mod:`werkzeug.security`.

    New digests always use ``method``. Accounts created before the switch to
    werkzeug carry bcrypt digests (``$2b$10$...``); those are still verified
    through :mod:`bcrypt`.

    :param method: Werkzeug method string, e.g. ``"scrypt"`` or
        ``"pbkdf2:sha256:600000"``.
    """

    method: str = "scrypt"

    def hash(self, password: str) -> str:
        if not isinstance(password, str) or not password:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(password, method=self.method)

    def verify(self, password: str, digest: str) -> bool:
        if not digest:
            return False
        try:
            if digest.startswith(BCRYPT_PREFIXES):
                return bcrypt.checkpw(password.encode("utf-8"), digest.encode("utf-8"))
            # ``check_password_hash`` is untyped; coerce to bool.
            return bool(check_password_hash(digest, password))
        except ValueError:
            # Unparseable digest: a failed login, never a server error
            log.warning("password.digest_unreadable")
            return False
