# routers/citizens.py

from typing import List

from fastapi import APIRouter, Depends

from core import store
from core.permission_helpers import requires_permission
from dependencies.auth import SessionContext
from models import CitizenCreate, CitizenRead, CitizenUpdate
from models.enums import EntityKind, Operation
from routers import businesses, criminal_records, driver_licenses, permits, properties, vehicles
from routers.crud import Resource, register_citizen_listing, register_crud_routes, to_read


router = APIRouter(
    prefix="/api/citizens",
    tags=["Citizens"],
)

# GET /api/wanted lives outside the /citizens prefix
wanted_router = APIRouter(
    prefix="/api",
    tags=["Citizens"],
)

resource = Resource(
    kind=EntityKind.citizen,
    store=store.citizens,
    create_model=CitizenCreate,
    update_model=CitizenUpdate,
    read_model=CitizenRead,
    label="citizen",
)


# -----------------------------------------------------
# WANTED LIST
# Registered before /{record_id} so "wanted" isn't parsed as an id
# -----------------------------------------------------
def list_wanted(ctx: SessionContext = Depends(requires_permission(EntityKind.citizen, Operation.list_all))):
    return to_read(resource, store.citizens.wanted(ctx.db))


router.add_api_route(
    "/wanted",
    list_wanted,
    methods=["GET"],
    response_model=List[CitizenRead],
    summary="List wanted citizens",
)

wanted_router.add_api_route(
    "/wanted",
    list_wanted,
    methods=["GET"],
    response_model=List[CitizenRead],
    summary="List wanted citizens",
)


register_crud_routes(router, resource)


# -----------------------------------------------------
# NESTED READS: /api/citizens/{citizen_id}/<child>
# Gated by the child kind's own list policy
# -----------------------------------------------------
register_citizen_listing(router, "/{citizen_id}/vehicles", vehicles.resource, "owner_id")
register_citizen_listing(router, "/{citizen_id}/criminal-records", criminal_records.resource, "citizen_id")
register_citizen_listing(router, "/{citizen_id}/properties", properties.resource, "owner_id")
register_citizen_listing(router, "/{citizen_id}/businesses", businesses.resource, "owner_id")
register_citizen_listing(router, "/{citizen_id}/permits", permits.resource, "citizen_id")
register_citizen_listing(router, "/{citizen_id}/driver-licenses", driver_licenses.resource, "citizen_id")
