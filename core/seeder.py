# core/seeder.py

from sqlalchemy.engine import Engine
from sqlmodel import Session

from core import store
from core.config import settings
from core.logging_config import logger
from models.enums import Role


def seed_bootstrap_admin(engine: Engine) -> bool:
    """
    Create the first IT account when the user table is empty.
    Without it nobody could log in to create anyone else.
    """
    username = settings.BOOTSTRAP_ADMIN_USERNAME
    password = settings.BOOTSTRAP_ADMIN_PASSWORD

    if not username or not password:
        return False

    with Session(engine) as db:
        if store.users.count(db) > 0:
            return False

        user = store.users.create(db, {
            "username": username,
            "password": password,
            "role": Role.IT.value,
            "department": "IT",
            "is_active": True,
        })

    logger.info(f"Seeded bootstrap IT account '{username}' (id {user.id})")
    return True
