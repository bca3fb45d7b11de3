# models/base.py

from datetime import datetime
from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel

from core.utils import as_utc, sanitize, utcnow


# -------------------------------------------------
# Table side (snake_case columns)
# -------------------------------------------------
class UTCDateTime(TypeDecorator):
    """Timestamp column that always reads and writes timezone-aware UTC."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class StampedTable(SQLModel):
    """
    Timestamps + authorship shared by every record table.
    created_by / updated_by are who wrote the row, not who owns the subject.
    """
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    created_by: int = Field(foreign_key="users.id", index=True)
    updated_by: int = Field(foreign_key="users.id", index=True)


# -------------------------------------------------
# API side (camelCase JSON)
# -------------------------------------------------
class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordPayload(ApiModel):
    """
    Incoming create/update body.
    Strings are trimmed, blanks become null, and `numeric_fields`
    accept numeric strings ("42", "$1,500").
    """
    numeric_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, data):
        if not isinstance(data, dict):
            return data
        numeric = set(cls.numeric_fields) | {to_camel(f) for f in cls.numeric_fields}
        return sanitize(data, numeric_fields=numeric)


class RecordRead(ApiModel):
    id: int
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
