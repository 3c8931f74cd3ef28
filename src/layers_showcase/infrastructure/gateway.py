"""Persistence gateways: record-level access to the ``users`` store.

A gateway is purely mechanical: no validation, no mapping to domain
entities. Records are plain dicts keyed by column name. Every engine
failure surfaces as :class:`StorageError` chained to the original.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol, TypedDict

from sqlalchemy import delete, insert, literal_column, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from layers_showcase.domain.errors import StorageError
from layers_showcase.infrastructure.database.schema import users

logger = logging.getLogger(__name__)


class UserRecord(TypedDict):
    """Storage shape of one row in ``users``."""

    id: str
    name: str


class PersistenceGateway(Protocol):
    """Record-level operations on a single table keyed by an id string."""

    def find_all(self) -> list[UserRecord]: ...

    def find_by_key(self, key: str) -> UserRecord | None: ...

    def insert(self, record: UserRecord) -> UserRecord: ...

    def update(self, key: str, partial: dict[str, Any]) -> UserRecord | None: ...

    def delete(self, key: str) -> bool: ...

    def close(self) -> None: ...


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into :class:`StorageError`."""
    try:
        yield
    except IntegrityError as exc:
        logger.error("Integrity error during %s: %s", operation, exc)
        raise StorageError(operation, "Integrity constraint violated") from exc
    except OperationalError as exc:
        logger.error("Operational error during %s: %s", operation, exc)
        raise StorageError(operation, "Connection or operational error") from exc
    except SQLAlchemyError as exc:
        logger.error("Database error during %s: %s", operation, exc)
        raise StorageError(operation) from exc


def _to_record(row: Any) -> UserRecord:
    return {"id": row["id"], "name": row["name"]}


class SqlUserGateway:
    """Gateway over the ``users`` table via SQLAlchemy Core."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine."""
        return self._engine

    def find_all(self) -> list[UserRecord]:
        """All rows in insertion order."""
        stmt = select(users.c.id, users.c.name).order_by(literal_column("rowid"))
        with _storage_errors("find_all"), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_record(row) for row in rows]

    def find_by_key(self, key: str) -> UserRecord | None:
        stmt = select(users.c.id, users.c.name).where(users.c.id == key)
        with _storage_errors("find_by_key"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _to_record(row) if row is not None else None

    def insert(self, record: UserRecord) -> UserRecord:
        """Insert *record* and return the row as stored."""
        with _storage_errors("insert"), self._engine.begin() as conn:
            conn.execute(insert(users).values(id=record["id"], name=record["name"]))
            row = conn.execute(select(users).where(users.c.id == record["id"])).mappings().one()
        return _to_record(row)

    def update(self, key: str, partial: dict[str, Any]) -> UserRecord | None:
        """Overwrite the columns in *partial* and return the new row, or None."""
        with _storage_errors("update"), self._engine.begin() as conn:
            result = conn.execute(update(users).where(users.c.id == key).values(**partial))
            if result.rowcount == 0:
                return None
            row = conn.execute(select(users).where(users.c.id == key)).mappings().one()
        return _to_record(row)

    def delete(self, key: str) -> bool:
        """Remove the row for *key*. Returns True iff a row existed."""
        with _storage_errors("delete"), self._engine.begin() as conn:
            removed = conn.execute(delete(users).where(users.c.id == key)).rowcount
        return removed > 0

    def close(self) -> None:
        self._engine.dispose()


class InMemoryUserGateway:
    """Dict-backed gateway preserving insertion order.

    Returns copies so callers can never mutate stored state. Primary key
    collisions raise :class:`StorageError` like the SQL gateway does.
    """

    def __init__(self, records: list[UserRecord] | None = None) -> None:
        self._rows: dict[str, UserRecord] = {}
        for record in records or []:
            self.insert(record)

    def find_all(self) -> list[UserRecord]:
        return [UserRecord(**row) for row in self._rows.values()]

    def find_by_key(self, key: str) -> UserRecord | None:
        row = self._rows.get(key)
        return UserRecord(**row) if row is not None else None

    def insert(self, record: UserRecord) -> UserRecord:
        if record["id"] in self._rows:
            raise StorageError("insert", "Integrity constraint violated")
        self._rows[record["id"]] = UserRecord(id=record["id"], name=record["name"])
        return UserRecord(**self._rows[record["id"]])

    def update(self, key: str, partial: dict[str, Any]) -> UserRecord | None:
        row = self._rows.get(key)
        if row is None:
            return None
        unknown = set(partial) - set(UserRecord.__annotations__)
        if unknown:
            raise StorageError("update", f"Unknown columns {sorted(unknown)}")
        self._rows[key] = UserRecord(**{**row, **partial})
        return UserRecord(**self._rows[key])

    def delete(self, key: str) -> bool:
        return self._rows.pop(key, None) is not None

    def close(self) -> None:
        self._rows.clear()
