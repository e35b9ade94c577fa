"""Unit tests for the generic resource service, run against the in-memory store."""

import pytest

from src.library_api.core.errors import NotFoundError
from src.library_api.core.services import ResourceService, replace_scalar_fields
from src.library_api.core.storage import InMemoryRecordStore
from src.library_api.entities.author import Author
from src.library_api.entities.book import Book


@pytest.fixture
def author_service() -> ResourceService[Author]:
    return ResourceService(InMemoryRecordStore("Author"), kind="Author")


@pytest.fixture
def book_service() -> ResourceService[Book]:
    return ResourceService(InMemoryRecordStore("Book"), kind="Book")


class TestCreate:
    def test_create_assigns_identifier(self, author_service):
        created = author_service.create(Author(name="Italo Calvino", nationality="Italian"))

        assert created.id is not None
        assert created.name == "Italo Calvino"
        assert created.nationality == "Italian"

    def test_create_then_read(self, author_service):
        created = author_service.create(Author(name="A", nationality="X"))

        assert author_service.get(created.id) == created

    def test_create_ignores_payload_identifier(self, author_service):
        first = author_service.create(Author(name="First"))
        second = author_service.create(Author(id=first.id, name="Second"))

        assert second.id != first.id
        assert author_service.get(first.id).name == "First"

    def test_absent_fields_take_zero_values(self, book_service):
        created = book_service.create(Book(title="Untitled draft"))

        assert created.author == ""
        assert created.publication_year == 0


class TestList:
    def test_empty_store_lists_nothing(self, author_service):
        assert author_service.list() == []

    def test_list_contains_exactly_created_records(self, author_service):
        created = [
            author_service.create(Author(name=f"Author {i}", nationality="N"))
            for i in range(5)
        ]

        listed = author_service.list()

        assert len(listed) == 5
        assert {a.id for a in listed} == {a.id for a in created}
        for record in created:
            assert record in listed


class TestUpdate:
    def test_update_overwrites_every_field(self, book_service):
        created = book_service.create(
            Book(title="Il nome della rosa", author="Umberto Eco", publication_year=1980)
        )

        updated = book_service.update(
            created.id, Book(title="New Title", author="New Author", publication_year=2020)
        )

        assert updated == Book(
            id=created.id, title="New Title", author="New Author", publication_year=2020
        )
        assert book_service.get(created.id) == updated

    def test_omitted_field_is_zeroed_not_preserved(self, author_service):
        created = author_service.create(Author(name="A", nationality="X"))

        updated = author_service.update(created.id, Author(name="B"))

        assert updated.id == created.id
        assert updated.name == "B"
        assert updated.nationality == ""

    def test_update_missing_id_raises_not_found(self, author_service):
        with pytest.raises(NotFoundError) as exc_info:
            author_service.update(999, Author(name="Nobody"))

        assert exc_info.value.record_id == 999
        assert exc_info.value.kind == "Author"
        assert author_service.list() == []

    def test_update_keeps_identifier(self, author_service):
        target = author_service.create(Author(name="Target"))
        other = author_service.create(Author(name="Other"))

        updated = author_service.update(target.id, Author(id=other.id, name="Renamed"))

        assert updated.id == target.id
        assert author_service.get(target.id).name == "Renamed"
        assert author_service.get(other.id).name == "Other"

    def test_custom_merge_cannot_reassign_identifier(self):
        def sloppy_merge(existing: Author, payload: Author) -> Author:
            return payload

        service = ResourceService(InMemoryRecordStore("Author"), kind="Author", merge=sloppy_merge)
        created = service.create(Author(name="A"))

        updated = service.update(created.id, Author(id=42, name="B"))

        assert updated.id == created.id
        assert service.get(created.id).name == "B"


class TestDelete:
    def test_delete_removes_record(self, author_service):
        created = author_service.create(Author(name="Gone"))

        author_service.delete(created.id)

        assert author_service.list() == []
        with pytest.raises(NotFoundError):
            author_service.get(created.id)

    def test_delete_is_idempotent(self, author_service):
        created = author_service.create(Author(name="Twice"))

        author_service.delete(created.id)
        author_service.delete(created.id)

        assert author_service.list() == []

    def test_delete_unknown_id_is_noop(self, author_service):
        kept = author_service.create(Author(name="Kept"))

        author_service.delete(12345)

        assert author_service.list() == [kept]


class TestReplaceScalarFields:
    def test_copies_zero_values(self):
        existing = Book(id=7, title="T", author="A", publication_year=1999)

        merged = replace_scalar_fields(existing, Book(title="", author="B"))

        assert merged == Book(id=7, title="", author="B", publication_year=0)

    def test_does_not_mutate_inputs(self):
        existing = Book(id=7, title="T")
        payload = Book(id=8, title="U")

        replace_scalar_fields(existing, payload)

        assert existing.title == "T"
        assert payload.id == 8
