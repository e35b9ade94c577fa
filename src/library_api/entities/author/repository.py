"""Author data access."""

from src.library_api.core.storage.record_store import SqlRecordStore
from src.library_api.entities.author.entity import Author
from src.library_api.entities.author.table import AuthorTable


class AuthorRepository(SqlRecordStore[Author, AuthorTable]):
    """SQL-backed store for authors."""

    entity_type = Author
    table_type = AuthorTable
