"""Author database table model."""

from src.library_api.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"
    __table_args__ = {"sqlite_autoincrement": True}

    name: str = ""
    nationality: str = ""
