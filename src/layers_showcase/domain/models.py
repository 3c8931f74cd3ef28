"""User entity and the update command.

INVARIANT: every User that exists past the facade boundary carries a
UUID ``id`` and a ``name`` of 1..100 characters. Repository and service
code never re-validate either field.
"""

from __future__ import annotations

from dataclasses import dataclass

NAME_MAX_LENGTH = 100


@dataclass(frozen=True, slots=True)
class User:
    """The single domain entity."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class UpdateUserData:
    """Partial update for a User. Only ``name`` is mutable; ``id`` never changes."""

    name: str
