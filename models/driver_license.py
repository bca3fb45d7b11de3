# models/driver_license.py

from typing import Optional

from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable


class DriverLicense(StampedTable, table=True):
    __tablename__ = "driver_licenses"

    id: Optional[int] = Field(default=None, primary_key=True)
    license_number: str = Field(index=True, unique=True)
    citizen_id: int = Field(foreign_key="citizens.id", index=True)
    is_valid: bool = Field(default=True, nullable=False)
    expires_at: Optional[str] = None
    restrictions: Optional[str] = None


class DriverLicenseCreate(RecordPayload):
    numeric_fields = ("citizen_id",)

    license_number: str
    citizen_id: int
    is_valid: bool = True
    expires_at: Optional[str] = None
    restrictions: Optional[str] = None


class DriverLicenseUpdate(RecordPayload):
    numeric_fields = ("citizen_id",)

    license_number: Optional[str] = None
    citizen_id: Optional[int] = None
    is_valid: Optional[bool] = None
    expires_at: Optional[str] = None
    restrictions: Optional[str] = None


class DriverLicenseRead(RecordRead):
    license_number: str
    citizen_id: int
    is_valid: bool
    expires_at: Optional[str] = None
    restrictions: Optional[str] = None
