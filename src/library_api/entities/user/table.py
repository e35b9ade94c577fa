"""User database table model."""

from src.library_api.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    name: str = ""
    email: str = ""
