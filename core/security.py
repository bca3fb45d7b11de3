# core/security.py

"""
Password hashing and session tokens.

Passwords are Argon2id hashes (salt embedded in the hash string).
Tokens are HS256 JWTs whose claims point at a server-side session row:
    sub → user id, sid → auth_sessions.id, exp → expiry
"""

import secrets
from datetime import datetime, timedelta
from typing import Tuple

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from jose import JWTError, jwt

from core.config import settings
from core.errors import Unauthenticated
from core.utils import as_utc


_hasher = PasswordHasher()

# Verified against when the username is unknown so both paths cost the same
_DUMMY_HASH = _hasher.hash("not-a-real-password")


# ============================================================
# PASSWORDS
# ============================================================
def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(stored_hash: str, password: str) -> bool:
    try:
        return _hasher.verify(stored_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def burn_password_check(password: str) -> None:
    verify_password(_DUMMY_HASH, password)


# ============================================================
# SESSION TOKENS
# ============================================================
def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def session_lifetime() -> timedelta:
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(user_id: int, session_id: str, expires_at: datetime) -> str:
    to_encode = {
        "sub": str(user_id),
        "sid": session_id,
        "exp": as_utc(expires_at),
    }
    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> Tuple[int, str]:
    """Return (user_id, session_id) or raise Unauthenticated."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError:
        raise Unauthenticated("Invalid or expired session")

    sub = payload.get("sub")
    sid = payload.get("sid")
    if not sub or not sid:
        raise Unauthenticated("Invalid or expired session")

    try:
        return int(sub), str(sid)
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid or expired session")
