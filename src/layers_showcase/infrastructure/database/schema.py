"""SQLAlchemy Core table definitions for the showcase database.

One table keyed by ``id``. Insertion order is recovered from SQLite's
implicit ``rowid`` rather than an extra column.
"""

from __future__ import annotations

from sqlalchemy import Column, MetaData, Table, Text

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
)
