"""Global Flask extension instances and document store wiring."""

from __future__ import annotations

import logging

from flask import Flask, current_app
from flask_jwt_extended import JWTManager
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

STORE_EXTENSION_KEY = "document_store"

log = logging.getLogger(__name__)

# Import-safe singleton; holds no per-app state
jwt = JWTManager()


def connect_store(app: Flask) -> Database:
    """Open a client from ``MONGODB_URI`` and return the configured database.

    Raises
    ------
    RuntimeError
        If the server cannot be reached within ``MONGODB_TIMEOUT_MS``.
    """
    uri = app.config["MONGODB_URI"]
    client: MongoClient = MongoClient(
        uri,
        serverSelectionTimeoutMS=app.config.get("MONGODB_TIMEOUT_MS", 5000),
    )
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise RuntimeError(f"Failed to connect to MongoDB at {uri!r}") from exc
    return client[app.config["MONGODB_DB"]]


def init_app(app: Flask, database: Database | None = None) -> None:
    """Initialize JWT support and bind the document store to ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the extensions.
    database: pymongo.database.Database | None
        Pre-built database handle (tests inject an in-memory one). When
        omitted a client is created from configuration.
    """
    from portfolio_api.core.errors import register_jwt_callbacks
    from portfolio_api.repositories import AccountRepository

    jwt.init_app(app)
    register_jwt_callbacks(jwt)

    if database is None:
        database = connect_store(app)
    app.extensions[STORE_EXTENSION_KEY] = database

    AccountRepository(database).ensure_indexes()
    log.info("store.connected db=%s", database.name)


def get_database() -> Database:
    """Return the database bound to the current application."""
    try:
        return current_app.extensions[STORE_EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("Document store is not initialized. Call init_app() first.") from None
