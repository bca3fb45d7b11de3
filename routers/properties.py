# routers/properties.py

from fastapi import APIRouter

from core import store
from models import PropertyCreate, PropertyRead, PropertyUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_crud_routes


router = APIRouter(
    prefix="/api/properties",
    tags=["Properties"],
)

resource = Resource(
    kind=EntityKind.property,
    store=store.properties,
    create_model=PropertyCreate,
    update_model=PropertyUpdate,
    read_model=PropertyRead,
    label="property",
)

register_crud_routes(router, resource)
