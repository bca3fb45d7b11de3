# routers/permits.py

from fastapi import APIRouter

from core import store
from models import PermitCreate, PermitRead, PermitUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_crud_routes


router = APIRouter(
    prefix="/api/permits",
    tags=["Permits"],
)

resource = Resource(
    kind=EntityKind.permit,
    store=store.permits,
    create_model=PermitCreate,
    update_model=PermitUpdate,
    read_model=PermitRead,
    label="permit",
)

register_crud_routes(router, resource)
