from typing import Optional

from pydantic import Field

from models.base import ApiModel, RecordPayload
from models.enums import Role
from models.user import UserRead


# -----------------------------------------------------
# LOGIN REQUEST
# -----------------------------------------------------
class LoginRequest(ApiModel):
    username: str
    password: str


# -----------------------------------------------------
# TOKEN RESPONSE (JWT wrapping a server-side session)
# -----------------------------------------------------
class TokenResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int           # Seconds until expiration
    user: UserRead


# -----------------------------------------------------
# SELF-REGISTRATION (account starts inactive)
# -----------------------------------------------------
class RegisterRequest(RecordPayload):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=6)
    role: Role
    department: Optional[str] = None
