# routers/health.py

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core.config import settings
from core.logging_config import logger

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/db
# Runs a trivial query against the configured database
# No auth required
# -----------------------------------------------------
@router.get("/db", summary="Database health check")
def health_db(request: Request):
    """
    Verifies the database answers a query.

    Safe for external health monitors (no auth required); the
    error text is returned but connection details are not.
    """
    engine = request.app.state.engine
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {
            "service": "Database",
            "status": "ok",
            "dialect": engine.dialect.name,
        }

    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {type(e).__name__}")
        return {
            "service": "Database",
            "status": "error",
            "error": type(e).__name__,
        }


# -----------------------------------------------------
# GET /health/app
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight health check for uptime monitors.
    """
    return {
        "service": settings.PROJECT_NAME,
        "status": "ok",
    }
