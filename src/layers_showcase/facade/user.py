"""UserFacade: validation, delegation, and outward mapping.

INVARIANT: every method validates before it delegates. A failed
validation raises :class:`ValidationError` and the service is never
called, so nothing is written.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from layers_showcase.domain.models import UpdateUserData, User
from layers_showcase.facade.schemas import (
    CreateUserSchema,
    UpdateUserSchema,
    UserIdSchema,
    UserOutput,
)
from layers_showcase.facade.validation import Invalid, Valid, raise_all, validate

if TYPE_CHECKING:
    from layers_showcase.services.user import UserService


def to_output(user: User) -> UserOutput:
    """Map a domain User onto the external output shape."""
    return UserOutput(id=user.id, name=user.name)


def _valid_id(user_id: object) -> str:
    result = validate(UserIdSchema, {"id": user_id})
    if isinstance(result, Invalid):
        result.raise_for()
    return result.value.id


class UserFacade:
    """External entry point for user operations."""

    def __init__(self, service: UserService) -> None:
        self._service = service

    @property
    def service(self) -> UserService:
        return self._service

    def get_all_users(self) -> list[UserOutput]:
        return [to_output(user) for user in self._service.get_all_users()]

    def get_user_by_id(self, user_id: str) -> UserOutput:
        return to_output(self._service.get_user_by_id(_valid_id(user_id)))

    def get_user_by_id_or_none(self, user_id: str) -> UserOutput | None:
        user = self._service.get_user_by_id_or_none(_valid_id(user_id))
        return to_output(user) if user is not None else None

    def create_user(self, data: object) -> UserOutput:
        """Validate *data*, mint a fresh UUID, and persist the new user.

        Any ``id`` present in *data* is ignored.
        """
        result = validate(CreateUserSchema, data)
        if isinstance(result, Invalid):
            result.raise_for()
        user = User(id=str(uuid.uuid4()), name=result.value.name)
        return to_output(self._service.create_user(user))

    def update_user(self, user_id: str, data: object) -> UserOutput:
        """Rename a user. Id and payload are validated independently."""
        id_result = validate(UserIdSchema, {"id": user_id})
        data_result = validate(UpdateUserSchema, data)
        if isinstance(id_result, Valid) and isinstance(data_result, Valid):
            command = UpdateUserData(name=data_result.value.name)
            return to_output(self._service.update_user(id_result.value.id, command))
        raise_all(id_result, data_result)

    def delete_user(self, user_id: str) -> None:
        self._service.delete_user(_valid_id(user_id))

    def user_exists(self, user_id: str) -> bool:
        return self._service.user_exists(_valid_id(user_id))
