"""Schema management for the record tables."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create every resource table that does not exist yet."""
        # Registers the table models with SQLModel.metadata
        from src.library_api.entities.registry import RESOURCES

        SQLModel.metadata.create_all(self._engine)
        logger.info(
            "Database initialized with tables: {}",
            ", ".join(resource.table_type.__tablename__ for resource in RESOURCES),
        )
