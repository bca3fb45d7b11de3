# models/session.py

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from core.utils import utcnow
from models.base import UTCDateTime


class AuthSession(SQLModel, table=True):
    """Server-side login session; the JWT only carries its id."""
    __tablename__ = "auth_sessions"

    id: str = Field(primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False)
    expires_at: datetime = Field(sa_type=UTCDateTime, nullable=False)
    user_agent: Optional[str] = None
