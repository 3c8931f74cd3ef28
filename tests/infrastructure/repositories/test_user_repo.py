"""Tests for UserRepository mapping and delegation."""

from __future__ import annotations

import pytest

from layers_showcase.domain.errors import RecordMappingError
from layers_showcase.domain.models import UpdateUserData, User
from layers_showcase.infrastructure.gateway import InMemoryUserGateway
from layers_showcase.infrastructure.repositories import UserRepository
from layers_showcase.infrastructure.repositories.user import to_domain, to_record


@pytest.fixture
def repo(memory_gateway: InMemoryUserGateway) -> UserRepository:
    return UserRepository(memory_gateway)


class TestMapping:
    def test_round_trip(self) -> None:
        user = User(id="a", name="Ada")
        assert to_domain(to_record(user)) == user

    def test_missing_field_is_fatal(self) -> None:
        with pytest.raises(RecordMappingError, match="name"):
            to_domain({"id": "a"})

    def test_non_string_field_is_fatal(self) -> None:
        with pytest.raises(RecordMappingError):
            to_domain({"id": "a", "name": None})


class TestUserRepository:
    def test_find_all_empty(self, repo: UserRepository) -> None:
        assert repo.find_all() == []

    def test_create_preserves_caller_id(self, repo: UserRepository) -> None:
        user = User(id="fixed-id", name="Ada")
        assert repo.create(user) == user
        assert repo.find_by_id("fixed-id") == user

    def test_find_by_id_missing(self, repo: UserRepository) -> None:
        assert repo.find_by_id("missing") is None

    def test_find_all_maps_every_record(self, repo: UserRepository) -> None:
        repo.create(User(id="a", name="Ada"))
        repo.create(User(id="b", name="Bob"))
        assert repo.find_all() == [User(id="a", name="Ada"), User(id="b", name="Bob")]

    def test_update_replaces_name_only(self, repo: UserRepository) -> None:
        repo.create(User(id="a", name="Ada"))
        assert repo.update("a", UpdateUserData(name="Ada King")) == User(id="a", name="Ada King")

    def test_update_missing_returns_none(self, repo: UserRepository) -> None:
        assert repo.update("missing", UpdateUserData(name="X")) is None

    def test_delete(self, repo: UserRepository) -> None:
        repo.create(User(id="a", name="Ada"))
        assert repo.delete("a") is True
        assert repo.delete("a") is False

    def test_corrupt_record_surfaces_as_mapping_error(self) -> None:
        gateway = InMemoryUserGateway()
        gateway._rows["bad"] = {"id": "bad"}  # type: ignore[typeddict-item]
        with pytest.raises(RecordMappingError):
            UserRepository(gateway).find_by_id("bad")

    def test_works_over_sql_gateway(self, sql_gateway) -> None:  # type: ignore[no-untyped-def]
        repo = UserRepository(sql_gateway)
        repo.create(User(id="a", name="Ada"))
        assert repo.find_all() == [User(id="a", name="Ada")]
