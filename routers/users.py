# routers/users.py

"""
Account management for IT and the department Directors.

Passwords are hashed in the store and never returned. Nobody may delete
their own account; a user who authored records can't be deleted at all (409).
"""

from fastapi import APIRouter

from core import store
from models import UserCreate, UserRead, UserUpdate
from models.enums import EntityKind
from routers.crud import Resource, register_crud_routes


router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)

resource = Resource(
    kind=EntityKind.user,
    store=store.users,
    create_model=UserCreate,
    update_model=UserUpdate,
    read_model=UserRead,
    label="user",
)

register_crud_routes(router, resource)
