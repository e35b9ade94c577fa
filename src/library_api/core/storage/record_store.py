"""Record store interface and implementations.

A store is a keyed collection of one record kind. The SQL implementation
persists through a SQLModel session; the in-memory one backs tests and
anything else that needs a store without a database.
"""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from sqlmodel import Session, SQLModel, select

from src.library_api.core.errors import NotFoundError
from src.library_api.entities._base import Entity

E = TypeVar("E", bound=Entity)
R = TypeVar("R", bound=SQLModel)


class RecordStore(ABC, Generic[E]):
    """Abstract interface for record storage backends."""

    @abstractmethod
    def insert(self, record: E) -> E:
        """Persist a new record under a freshly assigned identifier.

        Any identifier already present on ``record`` is ignored.

        Returns:
            The stored record, including its identifier
        """

    @abstractmethod
    def list_all(self) -> list[E]:
        """Return every stored record, in no particular order."""

    @abstractmethod
    def find_by_id(self, record_id: int) -> E | None:
        """Return the record with this identifier, or None."""

    @abstractmethod
    def save(self, record: E) -> E:
        """Write the scalar fields of an already stored record.

        Raises:
            NotFoundError: If no record with ``record.id`` is stored
        """

    @abstractmethod
    def delete_by_id(self, record_id: int) -> None:
        """Remove the record with this identifier; absent ids are a no-op."""


class InMemoryRecordStore(RecordStore[E]):
    """Dictionary-backed store handing out copies of its records."""

    def __init__(self, kind: str = "Record") -> None:
        self._kind = kind
        self._records: dict[int, E] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def insert(self, record: E) -> E:
        with self._lock:
            stored = record.model_copy(update={"id": next(self._ids)})
            self._records[stored.id] = stored
            return stored.model_copy()

    def list_all(self) -> list[E]:
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def find_by_id(self, record_id: int) -> E | None:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy() if record is not None else None

    def save(self, record: E) -> E:
        with self._lock:
            if record.id not in self._records:
                raise NotFoundError(self._kind, record.id)
            self._records[record.id] = record.model_copy()
            return record.model_copy()

    def delete_by_id(self, record_id: int) -> None:
        with self._lock:
            self._records.pop(record_id, None)


class SqlRecordStore(RecordStore[E], Generic[E, R]):
    """Data-access layer mapping one entity type onto one table.

    Subclasses bind ``entity_type`` and ``table_type``. Every write is
    committed before returning.
    """

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[SQLModel]]

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def kind(self) -> str:
        return self.entity_type.__name__

    def _to_entity(self, row: R) -> E:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def insert(self, record: E) -> E:
        row = self.table_type(**record.scalar_values())
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def list_all(self) -> list[E]:
        rows = self._session.exec(select(self.table_type)).all()
        return [self._to_entity(row) for row in rows]

    def find_by_id(self, record_id: int) -> E | None:
        row = self._session.get(self.table_type, record_id)
        if row is None:
            return None
        return self._to_entity(row)

    def save(self, record: E) -> E:
        row = self._session.get(self.table_type, record.id)
        if row is None:
            raise NotFoundError(self.kind, record.id)
        for name, value in record.scalar_values().items():
            setattr(row, name, value)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete_by_id(self, record_id: int) -> None:
        row = self._session.get(self.table_type, record_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
