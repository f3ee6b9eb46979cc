"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask
from pymongo.database import Database

from portfolio_api.core.config import BaseConfig, get_config
from portfolio_api.core.json import DocumentJSONProvider
from portfolio_api.core.logger import configure_logging, init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    database: Database | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    ``database`` replaces the client normally built from ``MONGODB_URI``;
    tests pass an in-memory one.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    app.json = DocumentJSONProvider(app)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from portfolio_api.core import extensions

    extensions.init_app(app, database)

    init_logging(app)

    from portfolio_api.core import cors

    cors.init_app(app)

    from portfolio_api.api import init_app as init_api

    init_api(app)

    from portfolio_api.core import errors

    errors.init_app(app)

    return app
