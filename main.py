import asyncio
import os
import sys
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure local imports resolve
sys.path.append(os.path.dirname(__file__))

# Core
from core.config import DEFAULT_JWT_SECRET, settings
from core.errors import AuthError, RecordsError, ValidationError
from core.logging_config import logger
from core.seeder import seed_bootstrap_admin
from database import build_engine, create_db_and_tables

# -------------------------------------------------
# Routers
# -------------------------------------------------
from routers import api_router
from routers.crud import validation_detail


def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(loc) or None,
            "message": err.get("msg", "Invalid value"),
        })
    return errors


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app(engine: Optional[Engine] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Miami RP Records API: role-gated records for the roleplay departments",
    )

    app.state.engine = engine if engine is not None else build_engine()

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Request timeout
    # -------------------------------------------------
    @app.middleware("http")
    async def enforce_timeout(request: Request, call_next):
        # Sessions opened for this request refuse to commit past the deadline
        request.state.deadline = time.monotonic() + settings.REQUEST_TIMEOUT_SECONDS
        try:
            return await asyncio.wait_for(call_next(request), timeout=settings.REQUEST_TIMEOUT_SECONDS)
        except asyncio.TimeoutError:
            logger.warning(f"Request timed out at {request.url}")
            return JSONResponse(status_code=504, content={"detail": "Request timed out"})

    # -------------------------------------------------
    # Startup: schema, bootstrap account, route log
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 Starting Miami RP Records API")

        if settings.ENV == "production" and settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET_KEY is the default value; set a real secret in production")

        create_db_and_tables(app.state.engine)
        seed_bootstrap_admin(app.state.engine)

        logger.info("📍 Registered routes:")
        for route in app.routes:
            path = getattr(route, "path", None)
            if path is None:
                continue
            methods = ",".join(sorted(getattr(route, "methods", None) or []))
            logger.info(f"➡️ {methods:10s} {path}")

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(RecordsError)
    async def handle_records_error(request: Request, exc: RecordsError):
        if exc.status_code in (401, 403, 500):
            logger.warning(f"HTTP {exc.status_code} at {request.url}: {exc.detail}")

        content = {"detail": exc.detail}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors

        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(status_code=exc.status_code, content=content, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "detail": validation_detail(request.scope.get("endpoint")),
                "errors": _field_errors(exc),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(
                f"HTTP {exc.status_code} at {request.url}: {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(api_router)

    return app


# Create the global FastAPI instance
app = create_app()
