"""Database initialization script."""

from src.library_api.core.services import DbManageService, DbSessionService


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    if database_service is not None:
        DbManageService(database_service.engine).create_all()
        return

    database_service = DbSessionService()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
