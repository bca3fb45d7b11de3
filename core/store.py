# core/store.py

"""
Entity store: single-row persistence per record kind.

Every method takes the request's SQLModel Session; stores hold no state.
Database failures surface as RecordsError subclasses (see core.errors).
"""

import secrets
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Type

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session, select

from core.errors import Conflict, ValidationError, handle_store_error
from core.logging_config import logger
from core.security import hash_password
from core.utils import escape_like, utcnow
from models import (
    AuthSession,
    Business,
    Citizen,
    CriminalRecord,
    DriverLicense,
    EntityKind,
    Permit,
    Property,
    User,
    Vehicle,
)


class EntityStore:
    def __init__(
        self,
        model: Type[SQLModel],
        label: str,
        search_fields: Sequence[str],
        stamped: bool = True,
        plural: Optional[str] = None,
    ):
        self.model = model
        self.label = label
        self.plural = plural or f"{label}s"
        self.search_fields = tuple(search_fields)
        self.stamped = stamped

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def _newest_first(self, query):
        return query.order_by(self.model.created_at.desc(), self.model.id.desc())

    def get(self, db: Session, record_id: int):
        return self._run(lambda: db.get(self.model, record_id), db, f"Failed to fetch {self.label}")

    def list_all(self, db: Session) -> List:
        query = self._newest_first(select(self.model))
        return self._run(lambda: list(db.exec(query).all()), db, f"Failed to fetch {self.plural}")

    def search(self, db: Session, text: str) -> List:
        """Case-insensitive substring match, OR across the kind's search fields."""
        pattern = f"%{escape_like(text.strip())}%"
        clauses = [
            getattr(self.model, field).ilike(pattern, escape="\\")
            for field in self.search_fields
        ]
        query = self._newest_first(select(self.model).where(or_(*clauses)))
        return self._run(lambda: list(db.exec(query).all()), db, f"Failed to search {self.plural}")

    def list_by(self, db: Session, field: str, value) -> List:
        column = getattr(self.model, field)
        query = self._newest_first(select(self.model).where(column == value))
        return self._run(lambda: list(db.exec(query).all()), db, f"Failed to fetch {self.plural}")

    # -----------------------------------------------------
    # Writes
    # -----------------------------------------------------
    def create(self, db: Session, data: Dict):
        if self.stamped and (data.get("created_by") is None or data.get("updated_by") is None):
            raise ValidationError(f"Invalid {self.label} data: missing author stamp")

        obj = self.model(**data)
        db.add(obj)
        self._commit(db, f"Failed to create {self.label}")
        db.refresh(obj)
        return obj

    def update(self, db: Session, record_id: int, data: Dict):
        """Partial update; returns None when the row does not exist."""
        obj = self.get(db, record_id)
        if obj is None:
            return None

        if self.stamped and "updated_by" in data and data["updated_by"] is None:
            raise ValidationError(f"Invalid {self.label} data: missing author stamp")

        for key, value in data.items():
            setattr(obj, key, value)
        obj.updated_at = utcnow()

        db.add(obj)
        self._commit(db, f"Failed to update {self.label}")
        db.refresh(obj)
        return obj

    def delete(self, db: Session, record_id: int) -> bool:
        obj = self.get(db, record_id)
        if obj is None:
            return False

        self._before_delete(db, obj)
        db.delete(obj)

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.info(f"Refused to delete {self.label} {record_id}: still referenced")
            raise Conflict(f"{self.label.capitalize()} {record_id} is still referenced by other records") from e
        except SQLAlchemyError as e:
            db.rollback()
            raise handle_store_error(e, f"Failed to delete {self.label}") from e

        return True

    def _before_delete(self, db: Session, obj) -> None:
        pass

    # -----------------------------------------------------
    # Helpers
    # -----------------------------------------------------
    def _commit(self, db: Session, operation: str) -> None:
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise handle_store_error(e, operation) from e

    def _run(self, fn, db: Session, operation: str):
        try:
            return fn()
        except SQLAlchemyError as e:
            db.rollback()
            raise handle_store_error(e, operation) from e


# ============================================================
# CITIZENS: citizenId generated when missing
# ============================================================
class CitizenStore(EntityStore):
    CITIZEN_ID_PREFIX = "MIA-"

    def create(self, db: Session, data: Dict):
        if not data.get("citizen_id"):
            data = {**data, "citizen_id": self.generate_citizen_id(db)}
        return super().create(db, data)

    def generate_citizen_id(self, db: Session, attempts: int = 20) -> str:
        for _ in range(attempts):
            candidate = f"{self.CITIZEN_ID_PREFIX}{secrets.randbelow(1_000_000):06d}"
            taken = db.exec(select(Citizen.id).where(Citizen.citizen_id == candidate)).first()
            if taken is None:
                return candidate
        raise ValidationError("Invalid citizen data: could not allocate a citizen ID")

    def wanted(self, db: Session) -> List[Citizen]:
        return self.list_by(db, "is_wanted", True)


# ============================================================
# USERS: passwords hashed on the way in
# ============================================================
class UserStore(EntityStore):
    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        query = select(User).where(User.username == username)
        return self._run(lambda: db.exec(query).first(), db, "Failed to fetch user")

    def count(self, db: Session) -> int:
        return self._run(lambda: len(db.exec(select(User.id)).all()), db, "Failed to count users")

    def create(self, db: Session, data: Dict) -> User:
        return super().create(db, self._hash(data))

    def update(self, db: Session, record_id: int, data: Dict) -> Optional[User]:
        return super().update(db, record_id, self._hash(data))

    def _before_delete(self, db: Session, obj: User) -> None:
        for session_row in db.exec(select(AuthSession).where(AuthSession.user_id == obj.id)).all():
            db.delete(session_row)
        # Sessions must be gone before the user row or the FK trips
        db.flush()

    @staticmethod
    def _hash(data: Dict) -> Dict:
        if data.get("password"):
            return {**data, "password": hash_password(data["password"])}
        # An explicit null password means "unchanged"
        return {k: v for k, v in data.items() if k != "password"}


# ============================================================
# AUTH SESSIONS
# ============================================================
class SessionStore:
    def create(
        self,
        db: Session,
        session_id: str,
        user_id: int,
        expires_at: datetime,
        user_agent: Optional[str] = None,
    ) -> AuthSession:
        row = AuthSession(
            id=session_id,
            user_id=user_id,
            expires_at=expires_at,
            user_agent=user_agent,
        )
        db.add(row)
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise handle_store_error(e, "Failed to create session") from e
        db.refresh(row)
        return row

    def get(self, db: Session, session_id: str) -> Optional[AuthSession]:
        return db.get(AuthSession, session_id)

    def delete(self, db: Session, session_id: str) -> bool:
        row = db.get(AuthSession, session_id)
        if row is None:
            return False
        db.delete(row)
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise handle_store_error(e, "Failed to end session") from e
        return True

    def purge_expired(self, db: Session, user_id: int) -> int:
        now = utcnow()
        expired = db.exec(
            select(AuthSession)
            .where(AuthSession.user_id == user_id)
            .where(AuthSession.expires_at <= now)
        ).all()
        for row in expired:
            db.delete(row)
        if expired:
            try:
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise handle_store_error(e, "Failed to purge sessions") from e
        return len(expired)


# ============================================================
# REGISTRY
# ============================================================
citizens = CitizenStore(
    Citizen, "citizen",
    ("first_name", "last_name", "citizen_id", "phone", "email"),
)
vehicles = EntityStore(
    Vehicle, "vehicle",
    ("license_plate", "make", "model", "color", "vin"),
)
driver_licenses = EntityStore(
    DriverLicense, "driver license",
    ("license_number", "restrictions"),
)
businesses = EntityStore(
    Business, "business",
    ("business_name", "business_license", "type", "address"),
    plural="businesses",
)
properties = EntityStore(
    Property, "property",
    ("address", "type"),
    plural="properties",
)
permits = EntityStore(
    Permit, "permit",
    ("permit_number", "permit_type"),
)
criminal_records = EntityStore(
    CriminalRecord, "criminal record",
    ("crime_type", "description", "status"),
)
users = UserStore(
    User, "user",
    ("username", "department"),
    stamped=False,
)
sessions = SessionStore()

STORES = {
    EntityKind.citizen: citizens,
    EntityKind.vehicle: vehicles,
    EntityKind.driver_license: driver_licenses,
    EntityKind.business: businesses,
    EntityKind.property: properties,
    EntityKind.permit: permits,
    EntityKind.criminal_record: criminal_records,
    EntityKind.user: users,
}
