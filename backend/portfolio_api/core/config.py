"""Application settings with environment-based simple classes."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Final

from dotenv import load_dotenv

log = logging.getLogger(__name__)

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*([a-z]*)\s*$", re.IGNORECASE)
# Unit spellings accepted by the Node ``ms`` package, in seconds
_DURATION_UNITS: Final[Mapping[str, float]] = {
    **dict.fromkeys(("", "s", "sec", "secs", "second", "seconds"), 1),
    **dict.fromkeys(("ms", "msec", "msecs", "millisecond", "milliseconds"), 0.001),
    **dict.fromkeys(("m", "min", "mins", "minute", "minutes"), 60),
    **dict.fromkeys(("h", "hr", "hrs", "hour", "hours"), 3600),
    **dict.fromkeys(("d", "day", "days"), 86400),
    **dict.fromkeys(("w", "week", "weeks"), 604800),
    **dict.fromkeys(("y", "yr", "yrs", "year", "years"), 31557600),
}

# Load .env during development (no-op when the file is missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_duration(raw: str | int | None, default: timedelta) -> timedelta:
    """Parse a token lifetime such as ``"3600"``, ``"30m"``, ``"2 days"`` or ``"1y"``.

    Parameters
    ----------
    raw: str | int | None
        Plain seconds, or a non-negative number followed by a unit. Units are
        ``ms``, ``s``, ``m``, ``h``, ``d``, ``w`` and ``y`` plus their long
        forms (``minutes``, ``hrs``, ``days``...), case-insensitive.
    default: datetime.timedelta
        Returned when ``raw`` is empty.

    Returns
    -------
    datetime.timedelta
        Parsed lifetime.

    Raises
    ------
    ValueError
        If ``raw`` does not match the supported format.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    if isinstance(raw, int):
        return timedelta(seconds=raw)
    match = _DURATION_RE.match(raw)
    unit_seconds = _DURATION_UNITS.get(match.group(2).lower()) if match else None
    if unit_seconds is None:
        raise ValueError(f"Unsupported duration {raw!r}; expected e.g. '3600', '30m', '1h', '2 days'")
    return timedelta(seconds=float(match.group(1)) * unit_seconds)


def env_duration(name: str, default: timedelta) -> timedelta:
    """Read a duration from ``name``; unreadable values log a warning and use ``default``."""
    raw = os.getenv(name)
    try:
        return parse_duration(raw, default)
    except ValueError:
        log.warning("config.invalid_duration name=%s value=%r default=%s", name, raw, default)
        return default


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret. Defaults to a development-safe placeholder.
    JWT_SECRET_KEY: str
        Key used by ``flask-jwt-extended`` for signing access tokens
        (``JWT_SECRET`` in the environment).
    JWT_ACCESS_TOKEN_EXPIRES: datetime.timedelta
        Lifetime of issued access tokens (``EXPIRES_IN`` in the environment).
    MONGODB_URI: str
        Connection string consumed by :class:`pymongo.MongoClient`.
    MONGODB_DB: str
        Database holding the ``users``, ``projects``, ``blogs`` and
        ``contact`` collections.
    MONGODB_TIMEOUT_MS: int
        Server selection timeout applied to the client.
    PORT: int
        Listen port used by ``python -m portfolio_api`` and gunicorn.
    PASSWORD_HASH_METHOD: str
        Method string passed to :func:`werkzeug.security.generate_password_hash`.
    REQUIRE_ADMIN_FOR_WRITES: bool
        When ``True`` project and blog mutations require an admin token.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS (``*`` for any).
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "CHANGE_ME_JWT")
    JWT_ACCESS_TOKEN_EXPIRES = env_duration("EXPIRES_IN", timedelta(hours=1))
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")
    REQUIRE_ADMIN_FOR_WRITES = env_bool("REQUIRE_ADMIN_FOR_WRITES", False)

    # Store
    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB = os.getenv("MONGODB_DB", "portfolio")
    MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # Server
    PORT = int(os.getenv("PORT", "5000"))
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses a cheap password hashing method so suites stay fast.
    - Expects the document store to be injected by the test harness.
    """

    TESTING = True
    DEBUG = False
    MONGODB_DB = os.getenv("TEST_MONGODB_DB", "portfolio_test")
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length-for-hs256"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
