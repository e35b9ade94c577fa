"""Generic CRUD service shared by every resource kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from loguru import logger

from src.library_api.core.errors import NotFoundError
from src.library_api.core.storage.record_store import RecordStore
from src.library_api.entities._base import Entity

E = TypeVar("E", bound=Entity)

Merge = Callable[[E, E], E]


def replace_scalar_fields(existing: E, payload: E) -> E:
    """Overwrite every scalar field of ``existing`` with the payload's value.

    Zero values are copied like any other value, so a field the client left
    out resets to ``""`` or ``0``. The identifier is kept from ``existing``.
    """
    return existing.model_copy(update=payload.scalar_values())


class ResourceService(Generic[E]):
    """List/get/create/update/delete over a single record store.

    Holds no state of its own; concurrent updates of the same record race
    and the last write wins.
    """

    def __init__(
        self,
        store: RecordStore[E],
        kind: str = "Record",
        merge: Merge = replace_scalar_fields,
    ) -> None:
        self._store = store
        self._kind = kind
        self._merge = merge

    @property
    def kind(self) -> str:
        return self._kind

    def list(self) -> list[E]:
        return self._store.list_all()

    def get(self, record_id: int) -> E:
        record = self._store.find_by_id(record_id)
        if record is None:
            raise NotFoundError(self._kind, record_id)
        return record

    def create(self, payload: E) -> E:
        created = self._store.insert(payload.model_copy(update={"id": None}))
        logger.debug("Created {} {}", self._kind, created.id)
        return created

    def update(self, record_id: int, payload: E) -> E:
        existing = self.get(record_id)
        merged = self._merge(existing, payload)
        # The merge function may not reassign the identifier
        merged = merged.model_copy(update={"id": existing.id})
        updated = self._store.save(merged)
        logger.debug("Updated {} {}", self._kind, record_id)
        return updated

    def delete(self, record_id: int) -> None:
        self._store.delete_by_id(record_id)
        logger.debug("Deleted {} {}", self._kind, record_id)
