# models/citizen.py

from typing import Optional

from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable
from models.enums import ImmigrationStatus


# -------------------------------------------------
# Table
# -------------------------------------------------
class Citizen(StampedTable, table=True):
    __tablename__ = "citizens"

    id: Optional[int] = Field(default=None, primary_key=True)
    citizen_id: str = Field(index=True, unique=True)     # MIA-123456
    first_name: str
    last_name: str
    date_of_birth: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None

    # Independent flags; no transition rules between them
    is_wanted: bool = Field(default=False, nullable=False)
    wanted_reason: Optional[str] = None
    is_amber: bool = Field(default=False, nullable=False)
    is_deceased: bool = Field(default=False, nullable=False)
    immigration_status: Optional[str] = None
    tax_fraud_flag: bool = Field(default=False, nullable=False)


# -------------------------------------------------
# Create
# -------------------------------------------------
class CitizenCreate(RecordPayload):
    """citizenId is generated when omitted."""
    citizen_id: Optional[str] = None
    first_name: str
    last_name: str
    date_of_birth: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None
    is_wanted: bool = False
    wanted_reason: Optional[str] = None
    is_amber: bool = False
    is_deceased: bool = False
    immigration_status: Optional[ImmigrationStatus] = None
    tax_fraud_flag: bool = False


# -------------------------------------------------
# Update (partial)
# -------------------------------------------------
class CitizenUpdate(RecordPayload):
    citizen_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None
    is_wanted: Optional[bool] = None
    wanted_reason: Optional[str] = None
    is_amber: Optional[bool] = None
    is_deceased: Optional[bool] = None
    immigration_status: Optional[ImmigrationStatus] = None
    tax_fraud_flag: Optional[bool] = None


# -------------------------------------------------
# Read
# -------------------------------------------------
class CitizenRead(RecordRead):
    citizen_id: str
    first_name: str
    last_name: str
    date_of_birth: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None
    is_wanted: bool
    wanted_reason: Optional[str] = None
    is_amber: bool
    is_deceased: bool
    immigration_status: Optional[str] = None
    tax_fraud_flag: bool
