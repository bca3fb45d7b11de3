# routers/businesses.py

from fastapi import APIRouter

from core import store
from models import BusinessCreate, BusinessRead, BusinessUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_crud_routes


router = APIRouter(
    prefix="/api/businesses",
    tags=["Businesses"],
)

resource = Resource(
    kind=EntityKind.business,
    store=store.businesses,
    create_model=BusinessCreate,
    update_model=BusinessUpdate,
    read_model=BusinessRead,
    label="business",
)

register_crud_routes(router, resource)
