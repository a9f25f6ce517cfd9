"""FastAPI application factory.

Every route under /api opens one store session per request, runs its
statement(s), and the session is closed once the handler returns or fails.
"""

from __future__ import annotations

from typing import Generator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldbook.config import configure_logging
from fieldbook.db.repo import DbSession
from fieldbook.db.session import get_session
from fieldbook.errors import register_error_handlers


def get_db_session() -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.

    Raises:
        StoreNotConfiguredError: If DATABASE_URL is not set.
    """
    session = get_session()
    try:
        yield session
    finally:
        session.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    configure_logging()

    app = FastAPI(
        title="Fieldbook API",
        description="Businesses, officers and customers for field sales teams",
        version="0.1.0",
    )

    # Registered first so CORSMiddleware wraps every error response
    register_error_handlers(app)

    # Any origin may call the API; no credentials are involved
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Include routes
    from fieldbook.api.routes import businesses, customers, init_data, officers

    app.include_router(init_data.router, prefix="/api")
    app.include_router(customers.router, prefix="/api")
    app.include_router(officers.router, prefix="/api")
    app.include_router(businesses.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
