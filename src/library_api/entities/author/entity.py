"""Entity: Author."""

from pydantic import Field

from src.library_api.entities._base import Entity


class Author(Entity):
    """An author record. Not linked to ``Book.author``."""

    name: str = Field(default="", description="Author's name")
    nationality: str = Field(default="", description="Author's nationality")
