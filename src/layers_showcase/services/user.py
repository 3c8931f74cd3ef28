"""UserService: existence rules for the User entity.

Exposes strict reads (raise :class:`UserNotFoundError`) for callers that
assume the user is live, and a permissive read (returns None) for
callers that branch on presence. Input is assumed valid; validation is
the facade's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from layers_showcase.domain.errors import UserNotFoundError

if TYPE_CHECKING:
    from layers_showcase.domain.models import UpdateUserData, User
    from layers_showcase.infrastructure.repositories.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Domain service for users."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> UserRepository:
        return self._repository

    def get_all_users(self) -> list[User]:
        return self._repository.find_all()

    def get_user_by_id(self, user_id: str) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id, "fetch")
        return user

    def get_user_by_id_or_none(self, user_id: str) -> User | None:
        return self._repository.find_by_id(user_id)

    def create_user(self, user: User) -> User:
        created = self._repository.create(user)
        logger.debug("Created user %s", created.id)
        return created

    def update_user(self, user_id: str, data: UpdateUserData) -> User:
        updated = self._repository.update(user_id, data)
        if updated is None:
            raise UserNotFoundError(user_id, "update")
        return updated

    def delete_user(self, user_id: str) -> None:
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id, "delete")
        logger.debug("Deleted user %s", user_id)

    def user_exists(self, user_id: str) -> bool:
        return self._repository.find_by_id(user_id) is not None
