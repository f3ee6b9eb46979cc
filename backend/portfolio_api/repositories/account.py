"""Account repository for registration and login lookups."""

from __future__ import annotations

import logging
import re

from bson import ObjectId
from pymongo.errors import OperationFailure

from portfolio_api.repositories.base import BaseRepository, Document

log = logging.getLogger(__name__)

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = frozenset({ROLE_USER, ROLE_ADMIN})


def normalize_email(email: str) -> str:
    """Lowercase and trim ``email`` so lookups are case-insensitive."""
    return email.strip().lower()


class AccountRepository(BaseRepository):
    """Persistence-only repository for accounts stored in ``users``.

    It NEVER hashes passwords nor issues tokens; callers hand it a digest.
    """

    collection_name = "users"
    email_index_name = "uq_users_email"

    def ensure_indexes(self) -> None:
        """Create the unique email index backing registration.

        Legacy data with duplicated emails prevents the index from being
        built; registration then relies on the lookup-before-insert alone.
        """
        try:
            self.collection.create_index("email", unique=True, name=self.email_index_name)
        except OperationFailure:
            log.warning("accounts.email_index_unavailable", exc_info=True)

    def _email_filter(self, email: str) -> dict:
        """Case-insensitive exact match on ``email``.

        Accounts stored before emails were normalised may carry mixed case;
        they must still be found by their lowercase form and vice versa.
        """
        pattern = f"^{re.escape(normalize_email(email))}$"
        return {"email": {"$regex": pattern, "$options": "i"}}

    def get_by_email(self, email: str) -> Document | None:
        """Fetch an account by email (case-insensitive).

        The normalised spelling wins when legacy data holds several accounts
        differing only by case.
        """
        found = self.collection.find_one({"email": normalize_email(email)})
        if found is None:
            found = self.collection.find_one(self._email_filter(email))
        return found

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when an account with ``email`` exists, ignoring case."""
        found = self.collection.find_one(self._email_filter(email), projection={"_id": 1})
        return found is not None

    def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: str = ROLE_USER,
    ) -> ObjectId:
        """Insert an account and return its id.

        :raises ValueError: If ``role`` is unknown.
        :raises pymongo.errors.DuplicateKeyError: If the email is already taken.
        """
        if role not in ROLES:
            raise ValueError(f"Unknown role {role!r}")
        return self.insert(
            {
                "username": username,
                "email": normalize_email(email),
                "password": password_hash,
                "role": role,
            }
        )
