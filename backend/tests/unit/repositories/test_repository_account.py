"""Unit tests for AccountRepository."""

import pytest
from pymongo.errors import DuplicateKeyError

from portfolio_api.repositories import ROLE_USER, AccountRepository


class TestAccountRepository:
    """Ensure ``AccountRepository`` stores and finds accounts by email."""

    @pytest.fixture()
    def repo(self, database):
        repo = AccountRepository(database)
        repo.ensure_indexes()
        return repo

    def test_create_and_get_by_email(self, repo):
        """Create an account and fetch it back case-insensitively."""
        oid = repo.create(username="alice", email=" Alice@Example.com ", password_hash="digest")

        fetched = repo.get_by_email("alice@example.com")
        assert fetched is not None
        assert fetched["_id"] == oid
        assert fetched["email"] == "alice@example.com"
        assert fetched["password"] == "digest"
        assert fetched["role"] == ROLE_USER

    def test_exists_by_email(self, repo):
        """Return existence flags for known and unknown email addresses."""
        repo.create(username="bob", email="bob@example.com", password_hash="x")

        assert repo.exists_by_email("BOB@example.com")
        assert not repo.exists_by_email("nonexistent@example.com")

    def test_unique_index_rejects_duplicate_email(self, repo):
        repo.create(username="carol", email="carol@example.com", password_hash="x")

        with pytest.raises(DuplicateKeyError):
            repo.create(username="carol2", email="CAROL@example.com", password_hash="y")

    def test_unknown_role_is_rejected(self, repo):
        with pytest.raises(ValueError):
            repo.create(username="dave", email="dave@example.com", password_hash="x", role="root")

    def test_legacy_mixed_case_email_is_found_case_insensitively(self, repo):
        """Accounts stored before normalisation are reachable by any casing."""
        repo.collection.insert_one({"username": "old", "email": "Legacy.User@Example.com", "password": "x"})

        fetched = repo.get_by_email("legacy.user@example.com")
        assert fetched is not None
        assert fetched["username"] == "old"
        assert repo.exists_by_email("LEGACY.USER@EXAMPLE.COM")
        assert not repo.exists_by_email("legacyXuser@example.com")
