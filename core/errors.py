# core/errors.py

from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError


# ============================================================
# ERROR TAXONOMY
# ============================================================
class RecordsError(Exception):
    """Base class for errors the API turns into a JSON response."""

    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthError(RecordsError):
    status_code = 401
    default_detail = "Authentication required"


class InvalidCredentials(AuthError):
    default_detail = "Invalid username or password"


class Unauthenticated(AuthError):
    default_detail = "Authentication required"


class Forbidden(RecordsError):
    status_code = 403
    default_detail = "Access denied"


class NotFound(RecordsError):
    status_code = 404
    default_detail = "Not found"


class Conflict(RecordsError):
    status_code = 409
    default_detail = "Record is still referenced"


class ValidationError(RecordsError):
    status_code = 400
    default_detail = "Invalid data"

    def __init__(self, detail: Optional[str] = None, errors: Optional[List[dict]] = None):
        super().__init__(detail)
        self.errors = errors or []


class StoreError(RecordsError):
    status_code = 500
    default_detail = "Database operation failed"


class RequestTimeout(RecordsError):
    status_code = 504
    default_detail = "Request timed out"


# ============================================================
# DATABASE ERROR TRANSLATION
# ============================================================
def extract_db_error(error: Exception) -> str:
    """
    Pull a readable message out of a SQLAlchemy / DBAPI error.
    SQLAlchemy wraps the driver exception in `.orig`.
    """
    orig = getattr(error, "orig", None)
    if orig is not None:
        return str(orig)

    if error.args:
        return str(error.args[0])

    return str(error) or type(error).__name__


def handle_store_error(error: SQLAlchemyError, operation: str = "Database operation") -> RecordsError:
    """
    Convert a database error into the matching RecordsError.
    Returns (doesn't raise) so the caller can re-raise with `from`.
    """
    from core.logging_config import logger

    detail = extract_db_error(error)
    lowered = detail.lower()

    if isinstance(error, IntegrityError):
        logger.info(f"{operation}: integrity violation: {detail}")
        if "unique" in lowered or "duplicate" in lowered:
            return ValidationError(f"{operation}: Record already exists")
        if "foreign key" in lowered:
            return ValidationError(f"{operation}: Invalid reference")
        if "not null" in lowered:
            return ValidationError(f"{operation}: Missing required field")
        return ValidationError(f"{operation}: Invalid data")

    logger.error(f"{operation}: {detail}")
    return StoreError(f"{operation} failed")
