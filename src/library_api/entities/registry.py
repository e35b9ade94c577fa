"""Descriptors for every resource kind served by the API."""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel import Session

from src.library_api.core.services.resource import ResourceService
from src.library_api.core.storage.record_store import SqlRecordStore
from src.library_api.entities._base import Entity, EntityTable
from src.library_api.entities.author import Author, AuthorRepository, AuthorTable
from src.library_api.entities.book import Book, BookRepository, BookTable
from src.library_api.entities.user import User, UserRepository, UserTable


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything needed to persist and serve one resource kind."""

    name: str
    entity_type: type[Entity]
    table_type: type[EntityTable]
    repository_type: type[SqlRecordStore]

    @property
    def kind(self) -> str:
        return self.entity_type.__name__

    def service(self, session: Session) -> ResourceService:
        """Build a service over a repository bound to ``session``."""
        return ResourceService(self.repository_type(session), kind=self.kind)


AUTHORS = ResourceDescriptor("authors", Author, AuthorTable, AuthorRepository)
BOOKS = ResourceDescriptor("books", Book, BookTable, BookRepository)
USERS = ResourceDescriptor("users", User, UserTable, UserRepository)

RESOURCES: tuple[ResourceDescriptor, ...] = (AUTHORS, BOOKS, USERS)
