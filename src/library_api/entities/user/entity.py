"""User domain entity."""

from pydantic import Field

from src.library_api.entities._base import Entity


class User(Entity):
    """A library user. Email addresses are not required to be unique."""

    name: str = Field(default="", description="User's name")
    email: str = Field(default="", description="User's email address")
