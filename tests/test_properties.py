"""End-to-end pipeline properties over both gateway implementations."""

from __future__ import annotations

import re

import pytest

from layers_showcase.domain.errors import UserNotFoundError, ValidationError
from layers_showcase.infrastructure.gateway import InMemoryUserGateway, SqlUserGateway
from layers_showcase.registry import DependencyRegistry
from tests.conftest import MISSING_ID

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


@pytest.fixture
def pipeline(gateway: InMemoryUserGateway | SqlUserGateway) -> DependencyRegistry:
    return DependencyRegistry.build(gateway)


def test_seed_scenario_preserves_creation_order(pipeline: DependencyRegistry) -> None:
    facade = pipeline.user_facade
    for name in ("User One", "User Two", "User Three"):
        facade.create_user({"name": name})
    assert [u.name for u in facade.get_all_users()] == ["User One", "User Two", "User Three"]


def test_create_then_read_round_trip(pipeline: DependencyRegistry) -> None:
    facade = pipeline.user_facade
    first = facade.create_user({"name": "Ada"})
    second = facade.create_user({"name": "Bob"})
    assert facade.get_all_users() == [first, second]
    stored = pipeline.user_repository.find_by_id(first.id)
    assert stored is not None
    assert (stored.id, stored.name) == (first.id, "Ada")
    assert facade.get_user_by_id(second.id) == second
    assert UUID_RE.match(first.id) and UUID_RE.match(second.id)


def test_update_is_reflected_in_reads(pipeline: DependencyRegistry) -> None:
    facade = pipeline.user_facade
    user = facade.create_user({"name": "Ada"})
    assert facade.update_user(user.id, {"name": "X"}).model_dump() == {"id": user.id, "name": "X"}
    assert facade.get_user_by_id(user.id).name == "X"


@pytest.mark.parametrize("data", [{"name": ""}, {}, {"name": "a" * 101}])
def test_invalid_create_persists_nothing(pipeline: DependencyRegistry, data: dict[str, str]) -> None:
    with pytest.raises(ValidationError):
        pipeline.user_facade.create_user(data)
    assert pipeline.gateway.find_all() == []


def test_strict_operations_on_missing_id(pipeline: DependencyRegistry) -> None:
    facade = pipeline.user_facade
    for call in (
        lambda: facade.get_user_by_id(MISSING_ID),
        lambda: facade.update_user(MISSING_ID, {"name": "X"}),
        lambda: facade.delete_user(MISSING_ID),
    ):
        with pytest.raises(UserNotFoundError) as exc_info:
            call()
        assert exc_info.value.user_id == MISSING_ID
    assert pipeline.gateway.find_all() == []


def test_delete_lifecycle(pipeline: DependencyRegistry) -> None:
    facade = pipeline.user_facade
    user = facade.create_user({"name": "Ada"})
    facade.delete_user(user.id)
    assert facade.user_exists(user.id) is False
    with pytest.raises(UserNotFoundError):
        facade.delete_user(user.id)
