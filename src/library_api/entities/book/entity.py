"""Entity: Book."""

from pydantic import AliasChoices, Field

from src.library_api.entities._base import Entity


class Book(Entity):
    """A book record.

    ``author`` is free text; it does not reference an ``Author`` record.
    The publication year travels as ``publicationYear`` on the wire.
    """

    title: str = Field(default="", description="Title")
    author: str = Field(default="", description="Author name as free text")
    publication_year: int = Field(
        default=0,
        validation_alias=AliasChoices("publicationYear", "publication_year"),
        serialization_alias="publicationYear",
        description="Year of first publication",
    )
