from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class for records identified by a storage-assigned integer id."""

    model_config = ConfigDict(from_attributes=True)

    id: int = PydanticField(description="Unique identifier assigned by storage")

    created_at: datetime | None = None
    updated_at: datetime | None = None


class EntityTable(SQLModel, table=False):
    """Base table with an auto-incrementing primary key and audit timestamps."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )


class SoftDeleteTable(EntityTable, table=False):
    """Table whose rows are never removed, only stamped with ``deleted_at``.

    A row with ``deleted_at`` set is soft-deleted; repositories exclude such
    rows from every read unless asked to include them.
    """

    deleted_at: datetime | None = Field(default=None, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
