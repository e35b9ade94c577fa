"""Book database table model."""

from src.library_api.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    title: str = ""
    author: str = ""
    publication_year: int = 0
