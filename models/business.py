# models/business.py

from typing import Optional

from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable


class Business(StampedTable, table=True):
    __tablename__ = "businesses"

    id: Optional[int] = Field(default=None, primary_key=True)
    business_name: str = Field(index=True)
    business_license: str = Field(unique=True)
    owner_id: int = Field(foreign_key="citizens.id", index=True)
    type: str                                   # restaurant, retail, food truck...
    address: str                                # plate number for food trucks
    is_active: bool = Field(default=True, nullable=False)


class BusinessCreate(RecordPayload):
    numeric_fields = ("owner_id",)

    business_name: str
    business_license: str
    owner_id: int
    type: str
    address: str
    is_active: bool = True


class BusinessUpdate(RecordPayload):
    numeric_fields = ("owner_id",)

    business_name: Optional[str] = None
    business_license: Optional[str] = None
    owner_id: Optional[int] = None
    type: Optional[str] = None
    address: Optional[str] = None
    is_active: Optional[bool] = None


class BusinessRead(RecordRead):
    business_name: str
    business_license: str
    owner_id: int
    type: str
    address: str
    is_active: bool
