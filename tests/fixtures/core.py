from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.library_api.core.services import DbSessionService

__all__ = ["engine", "session", "database_service", "client"]


@pytest.fixture
def engine() -> Generator[Engine]:
    """In-memory SQLite engine with every resource table created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Registers the table models with the metadata
    from src.library_api.entities.registry import RESOURCES  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine=engine)


@pytest.fixture
def client(database_service: DbSessionService) -> Generator[TestClient]:
    """Test client for an app wired to the in-memory database."""
    from src.library_api.api.http.app import create_app

    with TestClient(create_app(database_service=database_service)) as client:
        yield client
