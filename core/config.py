from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Miami RP Records API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Database
    # -------------------------------------------------
    DATABASE_URL: str = "sqlite:///./records.db"

    # -------------------------------------------------
    # Sessions (JWT carrying a server-side session id)
    # -------------------------------------------------
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 12, ge=1)

    # -------------------------------------------------
    # Accounts
    # -------------------------------------------------
    # Self-registered accounts start inactive until IT or a Director enables them
    ALLOW_SELF_REGISTRATION: bool = True

    # Seeded as an IT account when the user table is empty
    BOOTSTRAP_ADMIN_USERNAME: Optional[str] = None
    BOOTSTRAP_ADMIN_PASSWORD: Optional[str] = None

    # -------------------------------------------------
    # Login throttling
    # -------------------------------------------------
    LOGIN_RATE_LIMIT_MAX: int = Field(10, ge=1)
    LOGIN_RATE_LIMIT_WINDOW_SECONDS: int = Field(300, ge=1)

    # -------------------------------------------------
    # Requests
    # -------------------------------------------------
    REQUEST_TIMEOUT_SECONDS: float = Field(30.0, gt=0)

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    model_config = SettingsConfigDict(case_sensitive=True)


# Instantiate settings
settings = Settings()

# Render/Neon hand out 'postgres://'; SQLAlchemy wants an explicit driver
if settings.DATABASE_URL.startswith("postgres://"):
    settings.DATABASE_URL = settings.DATABASE_URL.replace(
        "postgres://", "postgresql+psycopg2://", 1
    )
