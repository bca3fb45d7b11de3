from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from core import store
from core.errors import Unauthenticated
from core.security import decode_access_token
from core.utils import as_utc, utcnow
from database import get_session
from models.base import ApiModel
from models.enums import Role
from models.user import User


# Missing header is our 401, not FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# Identity (what the policy engine sees)
# ============================================================
class Identity(ApiModel):
    id: int
    username: str
    role: Role
    department: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            department=user.department,
            is_active=user.is_active,
        )


# ============================================================
# Session context: one per request, handed to every handler
# ============================================================
@dataclass
class SessionContext:
    identity: Identity
    session_id: str
    db: Session


def resolve_session(db: Session, token: str) -> SessionContext:
    """
    Token → SessionContext.
    The JWT must be valid, its session row must still exist and be
    unexpired, and the user must exist. Inactive users still resolve;
    the policy engine turns them away.
    """
    user_id, session_id = decode_access_token(token)

    row = store.sessions.get(db, session_id)
    if row is None or row.user_id != user_id or as_utc(row.expires_at) <= utcnow():
        raise Unauthenticated("Invalid or expired session")

    user = store.users.get(db, user_id)
    if user is None:
        raise Unauthenticated("Invalid or expired session")

    return SessionContext(identity=Identity.from_user(user), session_id=session_id, db=db)


# ============================================================
# FastAPI dependencies
# ============================================================
def get_session_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_session),
) -> SessionContext:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return resolve_session(db, credentials.credentials)


def get_current_identity(ctx: SessionContext = Depends(get_session_context)) -> Identity:
    if not ctx.identity.is_active:
        raise Unauthenticated("Account is inactive")
    return ctx.identity

