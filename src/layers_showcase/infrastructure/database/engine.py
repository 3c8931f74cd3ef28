"""Database engine setup for SQLite.

SQLAlchemy Core (not ORM) is used: the gateway speaks in plain records
and the repository owns the mapping to domain entities, so an identity
map would only get in the way.

In-memory URLs (``sqlite://`` / ``sqlite:///:memory:``) share a single
connection through :class:`StaticPool`, otherwise every checkout would
see a fresh, empty database.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from layers_showcase.infrastructure.database.schema import metadata


def is_memory_url(url: str) -> bool:
    """Whether *url* points at an in-memory SQLite database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_db_engine(url: str) -> Engine:
    """Create an engine with foreign keys enabled and WAL mode for file databases."""
    memory = is_memory_url(url)
    if memory:
        engine = create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=False)

    if make_url(url).get_backend_name() == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            if not memory:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_database(url: str) -> Engine:
    """Initialize the database at *url* and return a ready engine.

    Creates the parent directory of a file-backed SQLite database and all
    tables from :data:`schema.metadata`.

    Idempotent; safe to call on an existing database.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and not is_memory_url(url):
        Path(str(parsed.database)).parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(url)
    metadata.create_all(engine)
    return engine
