import time
from typing import Generator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from core.config import settings
from core.errors import RequestTimeout


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str = None, **kwargs) -> Engine:
    database_url = database_url or settings.DATABASE_URL

    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(database_url, echo=False, **kwargs)

    # SQLite ignores REFERENCES clauses unless asked per connection
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def create_db_and_tables(engine: Engine) -> None:
    # Table models register themselves on import
    import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def _commit_deadline(deadline: float):
    """before_commit hook: refuse to commit once the request has been answered with 504."""

    def guard(session: Session) -> None:
        if time.monotonic() >= deadline:
            raise RequestTimeout()

    return guard


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        deadline = getattr(request.state, "deadline", None)
        if deadline is not None:
            event.listen(session, "before_commit", _commit_deadline(deadline))
        # Closing rolls back anything a refused commit left behind
        yield session
