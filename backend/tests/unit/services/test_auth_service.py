# tests/unit/services/test_auth_service.py
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from portfolio_api.infra import WerkzeugPasswordHasher
from portfolio_api.repositories import AccountRepository
from portfolio_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    StoreError,
)
from portfolio_api.services._shared.ports.token_provider import StubTokenProvider
from portfolio_api.services.auth.dto import AuthTokenConfig, LoginIn, RegisterIn, TokenOut
from portfolio_api.services.auth.service import EMAIL_TAKEN, AuthService

FAST_HASH = "pbkdf2:sha256:1000"


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def accounts(database) -> AccountRepository:
    repo = AccountRepository(database)
    repo.ensure_indexes()
    return repo


@pytest.fixture()
def service(accounts) -> AuthService:
    """Build an AuthService wired to the in-memory store and a stub token provider."""
    return AuthService(
        accounts=accounts,
        token_provider=StubTokenProvider(),
        hasher=WerkzeugPasswordHasher(method=FAST_HASH),
    )


# -------------------------------- Tests ----------------------------------- #
def test_register_stores_hashed_password_with_user_role(service, accounts):
    service.register(RegisterIn(username="alice", email="alice@example.com", password="s3cret"))

    stored = accounts.get_by_email("alice@example.com")
    assert stored is not None
    assert stored["username"] == "alice"
    assert stored["role"] == "user"
    assert stored["password"] != "s3cret"
    assert service.hasher.verify("s3cret", stored["password"])


def test_register_then_login_issues_token(service):
    service.register(RegisterIn(username="bob", email="bob@example.com", password="pw"))

    out = service.login(LoginIn(email="bob@example.com", password="pw"))

    assert isinstance(out, TokenOut)
    assert out.access_token.startswith("access.bob@example.com.")
    claims = service.tokens.decode(out.access_token)
    assert claims["email"] == "bob@example.com"
    assert claims["role"] == "user"


def test_register_existing_email_conflicts_regardless_of_password(service):
    service.register(RegisterIn(username="carol", email="carol@example.com", password="one"))

    with pytest.raises(ConflictError) as excinfo:
        service.register(RegisterIn(username="other", email="carol@example.com", password="two"))

    assert str(excinfo.value) == EMAIL_TAKEN


def test_register_race_on_unique_index_is_a_conflict():
    accounts = MagicMock(spec=AccountRepository)
    accounts.exists_by_email.return_value = False
    accounts.create.side_effect = DuplicateKeyError("E11000 duplicate key")
    service = AuthService(
        accounts=accounts,
        token_provider=StubTokenProvider(),
        hasher=WerkzeugPasswordHasher(method=FAST_HASH),
    )

    with pytest.raises(ConflictError):
        service.register(RegisterIn(username="d", email="d@example.com", password="pw"))


def test_login_wrong_password_and_unknown_email_fail_identically(service):
    service.register(RegisterIn(username="erin", email="erin@example.com", password="right"))

    with pytest.raises(AuthenticationError) as wrong_pw:
        service.login(LoginIn(email="erin@example.com", password="wrong"))
    with pytest.raises(AuthenticationError) as unknown:
        service.login(LoginIn(email="nobody@example.com", password="right"))

    assert str(wrong_pw.value) == str(unknown.value) == "Invalid email or password"


def test_login_uses_configured_expiry(accounts):
    service = AuthService(
        accounts=accounts,
        token_provider=StubTokenProvider(),
        hasher=WerkzeugPasswordHasher(method=FAST_HASH),
        token_cfg=AuthTokenConfig(),
    )
    service.register(RegisterIn(username="f", email="f@example.com", password="pw"))

    token = service.login(LoginIn(email="f@example.com", password="pw")).access_token

    assert "exp" in service.tokens.decode(token)


def test_store_failure_becomes_store_error():
    accounts = MagicMock(spec=AccountRepository)
    accounts.get_by_email.side_effect = ServerSelectionTimeoutError("down")
    service = AuthService(
        accounts=accounts,
        token_provider=StubTokenProvider(),
        hasher=WerkzeugPasswordHasher(method=FAST_HASH),
    )

    with pytest.raises(StoreError):
        service.login(LoginIn(email="g@example.com", password="pw"))
