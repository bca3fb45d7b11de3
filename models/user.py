# models/user.py

from datetime import datetime
from typing import Optional

from pydantic import Field as PydField
from sqlmodel import Field, SQLModel

from core.utils import utcnow
from models.base import ApiModel, RecordPayload, UTCDateTime
from models.enums import Role


# ===============================================================
# TABLE
# ===============================================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    password: str                                  # Argon2 hash, never serialized
    role: str
    department: Optional[str] = None
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)

    # Null for the bootstrap account and self-registrations
    created_by: Optional[int] = Field(default=None, foreign_key="users.id")
    updated_by: Optional[int] = Field(default=None, foreign_key="users.id")


# ===============================================================
# API MODELS
# ===============================================================
class UserCreate(RecordPayload):
    """Used when IT or a Director creates an account."""
    username: str = PydField(min_length=3, max_length=64)
    password: str = PydField(min_length=6)
    role: Role
    department: Optional[str] = None
    is_active: bool = True


class UserUpdate(RecordPayload):
    """Partial update; a new password is re-hashed."""
    username: Optional[str] = PydField(None, min_length=3, max_length=64)
    password: Optional[str] = PydField(None, min_length=6)
    role: Optional[Role] = None
    department: Optional[str] = None
    is_active: Optional[bool] = None


class UserRead(ApiModel):
    id: int
    username: str
    role: Role
    department: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
