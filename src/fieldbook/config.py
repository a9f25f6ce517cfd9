"""Runtime configuration for Fieldbook.

Settings come from the process environment and are read on demand, so a
deployment (or a test) can change them without rebuilding the app.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fieldbook.errors import StoreNotConfiguredError

DATABASE_URL_ENV = "DATABASE_URL"
LOG_LEVEL_ENV = "FIELDBOOK_LOG_LEVEL"

# Hosted Postgres providers hand out postgres:// URLs; SQLAlchemy only
# accepts the postgresql:// scheme.
_LEGACY_POSTGRES_SCHEME = "postgres://"


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    database_url: str | None
    log_level: str = "INFO"


def normalize_database_url(url: str) -> str:
    """Rewrite legacy postgres:// URLs to the scheme SQLAlchemy expects."""
    if url.startswith(_LEGACY_POSTGRES_SCHEME):
        return "postgresql://" + url[len(_LEGACY_POSTGRES_SCHEME) :]
    return url


def load_settings() -> Settings:
    """Load settings from the environment.

    A blank DATABASE_URL is treated the same as a missing one.
    """
    raw_url = os.environ.get(DATABASE_URL_ENV, "").strip()
    return Settings(
        database_url=normalize_database_url(raw_url) if raw_url else None,
        log_level=os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO",
    )


def require_database_url(settings: Settings | None = None) -> str:
    """Return the configured store URL.

    Raises:
        StoreNotConfiguredError: If DATABASE_URL is unset or blank.
    """
    if settings is None:
        settings = load_settings()
    if not settings.database_url:
        raise StoreNotConfiguredError(f"{DATABASE_URL_ENV} not set")
    return settings.database_url


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the fieldbook logger hierarchy."""
    if settings is None:
        settings = load_settings()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("fieldbook").setLevel(settings.log_level)
