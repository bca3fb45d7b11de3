# models/property.py

from typing import Optional

from pydantic import Field as PydField
from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable


class Property(StampedTable, table=True):
    __tablename__ = "properties"

    id: Optional[int] = Field(default=None, primary_key=True)
    address: str
    owner_id: int = Field(foreign_key="citizens.id", index=True)
    type: str                                   # house, apartment, commercial, warehouse
    is_owned: bool = Field(default=True, nullable=False)
    market_value: Optional[int] = None


class PropertyCreate(RecordPayload):
    numeric_fields = ("owner_id", "market_value")

    address: str
    owner_id: int
    type: str
    is_owned: bool = True
    market_value: Optional[int] = PydField(None, ge=0)


class PropertyUpdate(RecordPayload):
    numeric_fields = ("owner_id", "market_value")

    address: Optional[str] = None
    owner_id: Optional[int] = None
    type: Optional[str] = None
    is_owned: Optional[bool] = None
    market_value: Optional[int] = PydField(None, ge=0)


class PropertyRead(RecordRead):
    address: str
    owner_id: int
    type: str
    is_owned: bool
    market_value: Optional[int] = None
