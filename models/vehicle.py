# models/vehicle.py

from typing import Optional

from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable


class Vehicle(StampedTable, table=True):
    __tablename__ = "vehicles"

    id: Optional[int] = Field(default=None, primary_key=True)
    license_plate: str = Field(index=True, unique=True)
    make: str
    model: str
    year: int
    color: str
    type: str                                   # sedan, suv, truck, motorcycle...
    modifications: Optional[str] = None
    vin: Optional[str] = Field(default=None, unique=True)
    owner_id: int = Field(foreign_key="citizens.id", index=True)
    is_registered: bool = Field(default=True, nullable=False)
    registration_expires: Optional[str] = None
    is_stolen: bool = Field(default=False, nullable=False)


class VehicleCreate(RecordPayload):
    numeric_fields = ("year", "owner_id")

    license_plate: str
    make: str
    model: str
    year: int
    color: str
    type: str
    modifications: Optional[str] = None
    vin: Optional[str] = None
    owner_id: int
    is_registered: bool = True
    registration_expires: Optional[str] = None
    is_stolen: bool = False


class VehicleUpdate(RecordPayload):
    numeric_fields = ("year", "owner_id")

    license_plate: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None
    type: Optional[str] = None
    modifications: Optional[str] = None
    vin: Optional[str] = None
    owner_id: Optional[int] = None
    is_registered: Optional[bool] = None
    registration_expires: Optional[str] = None
    is_stolen: Optional[bool] = None


class VehicleRead(RecordRead):
    license_plate: str
    make: str
    model: str
    year: int
    color: str
    type: str
    modifications: Optional[str] = None
    vin: Optional[str] = None
    owner_id: int
    is_registered: bool
    registration_expires: Optional[str] = None
    is_stolen: bool
