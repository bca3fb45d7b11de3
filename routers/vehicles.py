# routers/vehicles.py

from fastapi import APIRouter

from core import store
from models import VehicleCreate, VehicleRead, VehicleUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_crud_routes


router = APIRouter(
    prefix="/api/vehicles",
    tags=["Vehicles"],
)

resource = Resource(
    kind=EntityKind.vehicle,
    store=store.vehicles,
    create_model=VehicleCreate,
    update_model=VehicleUpdate,
    read_model=VehicleRead,
    label="vehicle",
)

register_crud_routes(router, resource)
