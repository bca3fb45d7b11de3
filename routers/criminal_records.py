# routers/criminal_records.py

from fastapi import APIRouter

from core import store
from models import CriminalRecordCreate, CriminalRecordRead, CriminalRecordUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_citizen_listing, register_crud_routes


router = APIRouter(
    prefix="/api/criminal-records",
    tags=["Criminal Records"],
)

resource = Resource(
    kind=EntityKind.criminal_record,
    store=store.criminal_records,
    create_model=CriminalRecordCreate,
    update_model=CriminalRecordUpdate,
    read_model=CriminalRecordRead,
    label="criminal record",
)

# Older clients look records up per citizen here rather than under /api/citizens
register_citizen_listing(router, "/citizen/{citizen_id}", resource, "citizen_id")

register_crud_routes(router, resource)
