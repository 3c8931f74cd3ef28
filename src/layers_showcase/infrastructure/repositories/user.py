"""Repository translating between storage records and User entities.

Owns no business logic: absence is reported as None/False, never as an
error. The mapping in both directions is a total, lossless projection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from layers_showcase.domain.errors import RecordMappingError
from layers_showcase.domain.models import UpdateUserData, User

if TYPE_CHECKING:
    from layers_showcase.infrastructure.gateway import PersistenceGateway, UserRecord


def to_domain(record: UserRecord | dict[str, Any]) -> User:
    """Project a storage record onto a User.

    Raises :class:`RecordMappingError` if the record is missing a field or
    carries a non-string value.
    """
    try:
        user_id = record["id"]
        name = record["name"]
    except KeyError as exc:
        raise RecordMappingError(f"Stored record is missing field {exc.args[0]!r}") from exc
    if not isinstance(user_id, str) or not isinstance(name, str):
        raise RecordMappingError(f"Stored record has non-string fields: {record!r}")
    return User(id=user_id, name=name)


def to_record(user: User) -> UserRecord:
    """Project a User onto the storage record shape."""
    return {"id": user.id, "name": user.name}


class UserRepository:
    """Encapsulates persistence of User entities behind a gateway."""

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway

    @property
    def gateway(self) -> PersistenceGateway:
        return self._gateway

    def find_all(self) -> list[User]:
        return [to_domain(record) for record in self._gateway.find_all()]

    def find_by_id(self, user_id: str) -> User | None:
        record = self._gateway.find_by_key(user_id)
        return to_domain(record) if record is not None else None

    def create(self, user: User) -> User:
        """Persist *user* with its caller-supplied id and return the stored shape."""
        return to_domain(self._gateway.insert(to_record(user)))

    def update(self, user_id: str, data: UpdateUserData) -> User | None:
        record = self._gateway.update(user_id, {"name": data.name})
        return to_domain(record) if record is not None else None

    def delete(self, user_id: str) -> bool:
        return self._gateway.delete(user_id)
