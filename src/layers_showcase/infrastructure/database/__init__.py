"""SQLite database engine and schema via SQLAlchemy Core."""

from layers_showcase.infrastructure.database.engine import (
    create_db_engine,
    init_database,
    is_memory_url,
)
from layers_showcase.infrastructure.database.schema import metadata, users

__all__ = [
    "create_db_engine",
    "init_database",
    "is_memory_url",
    "metadata",
    "users",
]
