# pokedex/database.py
from __future__ import annotations

from typing import Any, Generator, TypeVar

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker, Session

from pokedex.config import DATABASE_URL

ModelT = TypeVar("ModelT", bound="Base")


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args(DATABASE_URL),
    future=True,
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)


@event.listens_for(Engine, "connect")
def _sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    if dbapi_connection.__class__.__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_or_create(
    db: Session,
    model: type[ModelT],
    defaults: dict[str, Any] | None = None,
    **keys: Any,
) -> tuple[ModelT, bool]:
    """
    Insert-or-leave-alone keyed on the natural unique columns in ``keys``.

    An existing row is returned untouched (``defaults`` are only used on create),
    so re-running a seed never rewrites stored data.
    """
    row = db.query(model).filter_by(**keys).first()
    if row is not None:
        return row, False

    row = model(**keys, **(defaults or {}))
    db.add(row)
    db.flush()
    return row, True
