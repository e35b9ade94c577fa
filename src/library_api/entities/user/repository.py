"""User data access."""

from src.library_api.core.storage.record_store import SqlRecordStore
from src.library_api.entities.user.entity import User
from src.library_api.entities.user.table import UserTable


class UserRepository(SqlRecordStore[User, UserTable]):
    """SQL-backed store for users."""

    entity_type = User
    table_type = UserTable
