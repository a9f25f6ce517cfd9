"""Database session management.

Engines and session factories are cached per connection URL so every
request reuses the same connection pool while getting its own session.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fieldbook.config import require_database_url
from fieldbook.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def get_engine(database_url: str | None = None) -> Engine:
    """Get SQLAlchemy engine for the store.

    Engines are cached by URL. SQLite URLs (used for local runs and tests)
    get check_same_thread=False, and in-memory SQLite a StaticPool so all
    sessions see the same database.

    Args:
        database_url: Connection URL. Defaults to DATABASE_URL from the environment.

    Returns:
        SQLAlchemy engine instance (cached).

    Raises:
        StoreNotConfiguredError: If no URL is given and none is configured.
    """
    if database_url is None:
        database_url = require_database_url()

    if database_url in _engine_cache:
        return _engine_cache[database_url]

    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=False, **kwargs)
    else:
        engine = create_engine(database_url, echo=False, pool_pre_ping=True)
    _engine_cache[database_url] = engine

    return engine


def _get_session_factory(database_url: str | None = None) -> sessionmaker:
    """Get cached session factory for the store."""
    if database_url is None:
        database_url = require_database_url()

    if database_url in _session_factory_cache:
        return _session_factory_cache[database_url]

    factory = sessionmaker(bind=get_engine(database_url))
    _session_factory_cache[database_url] = factory

    return factory


def get_session(database_url: str | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session.
    """
    factory = _get_session_factory(database_url)
    return factory()


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with get_db_session() as session:
            repo.upsert_business(session, BusinessEntity(name="Acme"))
    """
    session = get_session(database_url)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(database_url: str | None = None) -> None:
    """Create any missing tables."""
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)


def dispose_engines() -> None:
    """Dispose every cached engine and forget the caches."""
    for engine in _engine_cache.values():
        engine.dispose()
    _engine_cache.clear()
    _session_factory_cache.clear()
