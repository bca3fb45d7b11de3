# routers/driver_licenses.py

from fastapi import APIRouter

from core import store
from models import DriverLicenseCreate, DriverLicenseRead, DriverLicenseUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_citizen_listing, register_crud_routes


router = APIRouter(
    prefix="/api/driver-licenses",
    tags=["Driver Licenses"],
)

resource = Resource(
    kind=EntityKind.driver_license,
    store=store.driver_licenses,
    create_model=DriverLicenseCreate,
    update_model=DriverLicenseUpdate,
    read_model=DriverLicenseRead,
    label="driver license",
)

# Older clients look records up per citizen here rather than under /api/citizens
register_citizen_listing(router, "/citizen/{citizen_id}", resource, "citizen_id")

register_crud_routes(router, resource)
