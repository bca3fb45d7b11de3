# models/permit.py

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from core.utils import utcnow
from models.base import RecordPayload, RecordRead, StampedTable, UTCDateTime


class Permit(StampedTable, table=True):
    __tablename__ = "permits"

    id: Optional[int] = Field(default=None, primary_key=True)
    permit_number: str = Field(index=True, unique=True)
    permit_type: str                            # weapon, business, construction...
    citizen_id: int = Field(foreign_key="citizens.id", index=True)
    is_valid: bool = Field(default=True, nullable=False)
    expires_at: Optional[str] = None
    issued_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)


class PermitCreate(RecordPayload):
    numeric_fields = ("citizen_id",)

    permit_number: str
    permit_type: str
    citizen_id: int
    is_valid: bool = True
    expires_at: Optional[str] = None


class PermitUpdate(RecordPayload):
    numeric_fields = ("citizen_id",)

    permit_number: Optional[str] = None
    permit_type: Optional[str] = None
    citizen_id: Optional[int] = None
    is_valid: Optional[bool] = None
    expires_at: Optional[str] = None


class PermitRead(RecordRead):
    permit_number: str
    permit_type: str
    citizen_id: int
    is_valid: bool
    expires_at: Optional[str] = None
    issued_at: datetime
