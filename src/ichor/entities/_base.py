import uuid
from datetime import datetime
from typing import Annotated

import sqlalchemy as sa
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from src.ichor.core.sdk.clock import as_utc, utcnow

UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class Entity(BaseModel):
    """Base business model with a UUID identifier."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = PydanticField(
        default_factory=uuid.uuid4,
        description="Unique identifier for the entity",
    )


class EntityTable(SQLModel, table=False):
    """Base row model with a UUID primary key."""

    id: uuid.UUID = Field(
        primary_key=True,
        default_factory=uuid.uuid4,
        description="Unique identifier for the entity",
    )


def timestamp_field() -> datetime:
    """Column definition for timezone-aware audit timestamps."""
    return Field(
        sa_type=sa.DateTime(timezone=True),
        nullable=False,
        default_factory=utcnow,
    )
