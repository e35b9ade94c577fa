from datetime import UTC, datetime
from typing import Any

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base record with a store-assigned integer identifier.

    Subclasses declare only scalar fields, each with a zero-value default
    (``""`` or ``0``), so a payload that omits a field still validates.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = PydanticField(
        default=None,
        description="Store-assigned identifier; ignored on input",
    )

    @classmethod
    def scalar_fields(cls) -> tuple[str, ...]:
        """Names of every field except the identifier, in declaration order."""
        return tuple(name for name in cls.model_fields if name != "id")

    def scalar_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.scalar_fields()}


class EntityTable(SQLModel, table=False):
    """Base persistence model with an integer primary key and timestamps.

    Concrete tables set ``sqlite_autoincrement`` so SQLite never hands out
    the id of a deleted last row again.
    """

    id: int | None = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
