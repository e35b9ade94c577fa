"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.core.services import DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that lives for one request."""
    session = get_database_service(request).get_session()
    try:
        yield session
    finally:
        session.close()
