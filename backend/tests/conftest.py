"""Pytest fixtures wiring the application to an in-memory document store.

Each test gets a fresh :mod:`mongomock` database, so documents never leak
between cases and no MongoDB server is needed.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import mongomock
import pytest
from flask import Flask
from flask.testing import FlaskClient
from flask_jwt_extended import create_access_token
from pymongo.database import Database

from portfolio_api.core.config import TestingConfig
from portfolio_api.factory import create_app


@pytest.fixture()
def database() -> Generator[Database, None, None]:
    """Provide an empty in-memory database.

    Yields
    ------
    pymongo.database.Database
        ``mongomock`` database exposing the pymongo API.
    """
    client = mongomock.MongoClient()
    yield client[TestingConfig.MONGODB_DB]
    client.close()


@pytest.fixture()
def app_config() -> type[TestingConfig]:
    """Configuration class used by :func:`app`; override to tweak settings."""
    return TestingConfig


@pytest.fixture()
def app(app_config: type[TestingConfig], database: Database) -> Generator[Flask, None, None]:
    """Create a Flask application bound to the in-memory database.

    Returns
    -------
    Generator[Flask, None, None]
        Application with an active app context.
    """
    application = create_app(app_config, database=database)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return the Flask test client."""
    return app.test_client()


@pytest.fixture()
def issue_token(app: Flask) -> Callable[..., str]:
    """Return a helper minting access tokens with the given ``role`` claim."""

    def _issue(email: str = "admin@example.com", role: str = "admin", **claims: Any) -> str:
        return create_access_token(
            identity=email,
            additional_claims={"email": email, "role": role, **claims},
        )

    return _issue


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
