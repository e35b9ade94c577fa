"""Book data access."""

from src.library_api.core.storage.record_store import SqlRecordStore
from src.library_api.entities.book.entity import Book
from src.library_api.entities.book.table import BookTable


class BookRepository(SqlRecordStore[Book, BookTable]):
    """SQL-backed store for books."""

    entity_type = Book
    table_type = BookTable
