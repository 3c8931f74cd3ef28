"""Shared pytest fixtures and test helpers for layers-showcase tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from layers_showcase.facade.schemas import UserOutput
from layers_showcase.facade.user import UserFacade
from layers_showcase.infrastructure.database.engine import init_database
from layers_showcase.infrastructure.gateway import (
    InMemoryUserGateway,
    SqlUserGateway,
    UserRecord,
)
from layers_showcase.registry import DependencyRegistry, reset_registry

VALID_ID = "7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13"
MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """Initialized in-memory SQLite engine with all tables created."""
    engine = init_database("sqlite://")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_gateway(db_engine: Engine) -> SqlUserGateway:
    return SqlUserGateway(db_engine)


@pytest.fixture
def memory_gateway() -> InMemoryUserGateway:
    return InMemoryUserGateway()


@pytest.fixture(params=["memory", "sql"])
def gateway(
    request: pytest.FixtureRequest,
    memory_gateway: InMemoryUserGateway,
    sql_gateway: SqlUserGateway,
) -> InMemoryUserGateway | SqlUserGateway:
    """Each gateway implementation in turn, for contract tests."""
    if request.param == "memory":
        return memory_gateway
    return sql_gateway


@pytest.fixture
def registry(memory_gateway: InMemoryUserGateway) -> DependencyRegistry:
    """A test-owned registry over an isolated in-memory store."""
    return DependencyRegistry.build(memory_gateway)


@pytest.fixture
def facade(registry: DependencyRegistry) -> UserFacade:
    return registry.user_facade


@pytest.fixture(autouse=True)
def _clean_global_registry() -> Generator[None]:
    """Every test starts and ends without a process-wide registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("LAYERS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class SpyGateway(InMemoryUserGateway):
    """In-memory gateway that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        super().__init__()

    def find_all(self) -> list[UserRecord]:
        self.calls.append(("find_all", ()))
        return super().find_all()

    def find_by_key(self, key: str) -> UserRecord | None:
        self.calls.append(("find_by_key", (key,)))
        return super().find_by_key(key)

    def insert(self, record: UserRecord) -> UserRecord:
        self.calls.append(("insert", (record,)))
        return super().insert(record)

    def update(self, key: str, partial: dict[str, Any]) -> UserRecord | None:
        self.calls.append(("update", (key, partial)))
        return super().update(key, partial)

    def delete(self, key: str) -> bool:
        self.calls.append(("delete", (key,)))
        return super().delete(key)


def create_user(facade: UserFacade, name: str) -> UserOutput:
    """Create a user through the facade."""
    return facade.create_user({"name": name})
