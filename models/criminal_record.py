# models/criminal_record.py

from typing import Optional

from pydantic import Field as PydField
from sqlmodel import Field

from models.base import RecordPayload, RecordRead, StampedTable
from models.enums import CriminalRecordStatus


class CriminalRecord(StampedTable, table=True):
    __tablename__ = "criminal_records"

    id: Optional[int] = Field(default=None, primary_key=True)
    citizen_id: int = Field(foreign_key="citizens.id", index=True)
    crime_type: str
    description: Optional[str] = None
    date_of_crime: str
    status: str                                 # active, resolved, warrant
    fine: Optional[int] = None
    is_paid: bool = Field(default=False, nullable=False)
    jail_time: Optional[str] = None
    court_date: Optional[str] = None


class CriminalRecordCreate(RecordPayload):
    numeric_fields = ("citizen_id", "fine")

    citizen_id: int
    crime_type: str
    description: Optional[str] = None
    date_of_crime: str
    status: CriminalRecordStatus
    fine: Optional[int] = PydField(None, ge=0)
    is_paid: bool = False
    jail_time: Optional[str] = None
    court_date: Optional[str] = None


class CriminalRecordUpdate(RecordPayload):
    numeric_fields = ("citizen_id", "fine")

    citizen_id: Optional[int] = None
    crime_type: Optional[str] = None
    description: Optional[str] = None
    date_of_crime: Optional[str] = None
    status: Optional[CriminalRecordStatus] = None
    fine: Optional[int] = PydField(None, ge=0)
    is_paid: Optional[bool] = None
    jail_time: Optional[str] = None
    court_date: Optional[str] = None


class CriminalRecordRead(RecordRead):
    citizen_id: int
    crime_type: str
    description: Optional[str] = None
    date_of_crime: str
    status: str
    fine: Optional[int] = None
    is_paid: bool
    jail_time: Optional[str] = None
    court_date: Optional[str] = None
