# routers/crud.py

"""
Standard REST handlers shared by every record kind:

    GET    {prefix}              list (or search with ?search= / ?q=)
    GET    {prefix}/search?q=    search
    GET    {prefix}/{record_id}  fetch one
    POST   {prefix}              create   → 201
    PUT    {prefix}/{record_id}  update   → 200 / 404
    DELETE {prefix}/{record_id}  delete   → 204 / 404

Each handler: resolve session → authorize → validate → stamp → store.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel

from core.errors import NotFound, ValidationError
from core.logging_config import logger
from core import store as stores
from core.permission_helpers import authorize, requires_permission
from core.store import EntityStore
from dependencies.auth import Identity, SessionContext, get_session_context
from models.enums import EntityKind, Operation


@dataclass(frozen=True)
class Resource:
    kind: EntityKind
    store: EntityStore
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    read_model: Type[BaseModel]
    label: str                      # "citizen", "criminal record"...


# ============================================================
# AUTHORSHIP STAMPS
# ============================================================
def stamp_create(data: dict, identity: Identity) -> dict:
    return {**data, "created_by": identity.id, "updated_by": identity.id}


def stamp_update(data: dict, identity: Identity) -> dict:
    # created_by is never touched after insert
    data = {k: v for k, v in data.items() if k != "created_by"}
    return {**data, "updated_by": identity.id}


def to_read(resource: Resource, rows) -> list:
    return [resource.read_model.model_validate(row) for row in rows]


# Endpoint → kind label, for "Invalid <kind> data" on body validation failures
VALIDATION_LABELS: Dict[Callable, str] = {}


def validation_detail(endpoint: Optional[Callable]) -> str:
    label = VALIDATION_LABELS.get(endpoint)
    return f"Invalid {label} data" if label else "Invalid data"


# ============================================================
# ROUTE REGISTRATION
# ============================================================
def register_crud_routes(router: APIRouter, resource: Resource) -> APIRouter:
    kind = resource.kind
    store = resource.store
    label = resource.label
    Title = label[:1].upper() + label[1:]
    CreateModel = resource.create_model
    UpdateModel = resource.update_model
    ReadModel = resource.read_model

    # -----------------------------------------------------
    # LIST / SEARCH
    # -----------------------------------------------------
    @router.get(
        "",
        response_model=List[ReadModel],
        summary=f"List {store.plural}",
        description=f"All {store.plural}, newest first. `search` or `q` switches to substring search.",
    )
    def list_records(
        search: Optional[str] = Query(None, description="Case-insensitive substring"),
        q: Optional[str] = Query(None, description="Alias for search"),
        ctx: SessionContext = Depends(get_session_context),
    ):
        # An empty search= still lets q= through
        text = search or q

        if text and text.strip():
            authorize(ctx.identity, kind, Operation.search)
            return to_read(resource, store.search(ctx.db, text))

        authorize(ctx.identity, kind, Operation.list_all)
        return to_read(resource, store.list_all(ctx.db))

    @router.get(
        "/search",
        response_model=List[ReadModel],
        summary=f"Search {store.plural}",
    )
    def search_records(
        q: Optional[str] = Query(None, description="Case-insensitive substring"),
        ctx: SessionContext = Depends(requires_permission(kind, Operation.search)),
    ):
        if not q or not q.strip():
            raise ValidationError("Search query required")
        return to_read(resource, store.search(ctx.db, q))

    # -----------------------------------------------------
    # GET ONE
    # -----------------------------------------------------
    @router.get(
        "/{record_id}",
        response_model=ReadModel,
        summary=f"Get {label}",
    )
    def get_record(
        record_id: int,
        ctx: SessionContext = Depends(requires_permission(kind, Operation.get, target_param="record_id")),
    ):
        obj = store.get(ctx.db, record_id)
        if obj is None:
            raise NotFound(f"{Title} not found")
        return ReadModel.model_validate(obj)

    # -----------------------------------------------------
    # CREATE
    # -----------------------------------------------------
    @router.post(
        "",
        response_model=ReadModel,
        status_code=201,
        summary=f"Create {label}",
    )
    def create_record(
        payload: CreateModel,
        ctx: SessionContext = Depends(requires_permission(kind, Operation.create)),
    ):
        data = stamp_create(payload.model_dump(mode="json"), ctx.identity)
        obj = store.create(ctx.db, data)
        logger.info(f"User {ctx.identity.id} created {label} {obj.id}")
        return ReadModel.model_validate(obj)

    # -----------------------------------------------------
    # UPDATE (partial)
    # -----------------------------------------------------
    @router.put(
        "/{record_id}",
        response_model=ReadModel,
        summary=f"Update {label}",
    )
    def update_record(
        record_id: int,
        payload: UpdateModel,
        ctx: SessionContext = Depends(requires_permission(kind, Operation.update, target_param="record_id")),
    ):
        data = stamp_update(payload.model_dump(exclude_unset=True, mode="json"), ctx.identity)
        obj = store.update(ctx.db, record_id, data)
        if obj is None:
            raise NotFound(f"{Title} not found")
        logger.info(f"User {ctx.identity.id} updated {label} {record_id}")
        return ReadModel.model_validate(obj)

    VALIDATION_LABELS[create_record] = label
    VALIDATION_LABELS[update_record] = label

    # -----------------------------------------------------
    # DELETE
    # -----------------------------------------------------
    @router.delete(
        "/{record_id}",
        status_code=204,
        response_class=Response,
        summary=f"Delete {label}",
    )
    def delete_record(
        record_id: int,
        ctx: SessionContext = Depends(requires_permission(kind, Operation.delete, target_param="record_id")),
    ):
        if not store.delete(ctx.db, record_id):
            raise NotFound(f"{Title} not found")
        logger.info(f"User {ctx.identity.id} deleted {label} {record_id}")
        return Response(status_code=204)

    return router


# ============================================================
# CHILD RECORDS OF A CITIZEN
# ============================================================
def list_for_citizen(ctx: SessionContext, resource: Resource, fk_field: str, citizen_id: int) -> list:
    """
    Records of `resource` pointing at one citizen.
    Caller has already been authorized for the child kind's list_all.
    """
    if stores.citizens.get(ctx.db, citizen_id) is None:
        raise NotFound("Citizen not found")
    return to_read(resource, resource.store.list_by(ctx.db, fk_field, citizen_id))


def register_citizen_listing(router: APIRouter, path: str, resource: Resource, fk_field: str) -> None:
    """GET {path} listing one citizen's records of this kind, gated by its list_all policy."""

    def list_children(
        citizen_id: int,
        ctx: SessionContext = Depends(requires_permission(resource.kind, Operation.list_all)),
    ):
        return list_for_citizen(ctx, resource, fk_field, citizen_id)

    router.add_api_route(
        path,
        list_children,
        methods=["GET"],
        response_model=List[resource.read_model],
        summary=f"List a citizen's {resource.store.plural}",
    )
