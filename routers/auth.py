from fastapi import APIRouter, Depends, Request, Response
from sqlmodel import Session

from core import store
from core.config import settings
from core.errors import Forbidden, InvalidCredentials, ValidationError
from core.logging_config import logger
from core.rate_limiter import get_rate_limit_identifier, require_rate_limit
from core.security import (
    burn_password_check,
    create_access_token,
    new_session_id,
    session_lifetime,
    verify_password,
)
from core.utils import utcnow
from database import get_session
from dependencies.auth import Identity, SessionContext, get_current_identity, get_session_context
from models import LoginRequest, RegisterRequest, TokenResponse, UserRead


router = APIRouter(
    prefix="/api",
    tags=["Auth"],
)


# ============================================================
# LOGIN
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_session)):

    username = payload.username.strip()
    require_rate_limit(request, identifier=get_rate_limit_identifier(request, username))

    user = store.users.get_by_username(db, username)

    if user is None:
        # Same cost as a real check so timing doesn't reveal unknown usernames
        burn_password_check(payload.password)
        logger.warning(f"Login failed for unknown user '{username}'")
        raise InvalidCredentials()

    if not verify_password(user.password, payload.password):
        logger.warning(f"Login failed for user {user.id}: bad password")
        raise InvalidCredentials()

    if not user.is_active:
        logger.warning(f"Login refused for inactive user {user.id}")
        raise InvalidCredentials()

    store.sessions.purge_expired(db, user.id)

    lifetime = session_lifetime()
    expires_at = utcnow() + lifetime
    session_row = store.sessions.create(
        db,
        session_id=new_session_id(),
        user_id=user.id,
        expires_at=expires_at,
        user_agent=request.headers.get("User-Agent"),
    )

    logger.info(f"User {user.id} logged in")

    return TokenResponse(
        access_token=create_access_token(user.id, session_row.id, expires_at),
        expires_in=int(lifetime.total_seconds()),
        user=UserRead.model_validate(user),
    )


# ============================================================
# REGISTER (account starts inactive)
# ============================================================
@router.post("/register", response_model=UserRead, status_code=201, summary="Request an account")
def register(payload: RegisterRequest, db: Session = Depends(get_session)):
    """
    Self-service sign-up. The new account stays inactive until
    IT or a Director switches it on.
    """
    if not settings.ALLOW_SELF_REGISTRATION:
        raise Forbidden("Self-registration is disabled")

    if store.users.get_by_username(db, payload.username) is not None:
        raise ValidationError("Username already taken")

    data = payload.model_dump(mode="json")
    data["is_active"] = False
    user = store.users.create(db, data)

    logger.info(f"Registered inactive user {user.id} ({user.role})")
    return UserRead.model_validate(user)


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", status_code=204, response_class=Response, summary="End the current session")
def logout(ctx: SessionContext = Depends(get_session_context)):
    store.sessions.delete(ctx.db, ctx.session_id)
    logger.info(f"User {ctx.identity.id} logged out")
    return Response(status_code=204)


# ============================================================
# CURRENT USER
# ============================================================
@router.get("/user", response_model=Identity, summary="Current authenticated user")
def read_me(identity: Identity = Depends(get_current_identity)):
    return identity
