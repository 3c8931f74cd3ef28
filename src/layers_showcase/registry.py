"""DependencyRegistry: the composition root.

Builds the graph gateway -> repository -> service -> facade in that
order and exposes every layer as an immutable field of one handle.
All layers inside a registry share the exact instances built alongside
them.

Two ways to get one:

- Construct explicitly with :meth:`DependencyRegistry.build` (tests inject
  an :class:`InMemoryUserGateway`) or :meth:`DependencyRegistry.from_settings`.
  The CLI does this through its ``AppContext``.
- :func:`get_registry` returns a process-wide instance created lazily on
  first access; :func:`reset_registry` discards it so the next access
  re-creates it. Creation is serialized by a lock, so at most one
  registry is built per reset.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from layers_showcase.facade.user import UserFacade
from layers_showcase.infrastructure.database.engine import init_database
from layers_showcase.infrastructure.gateway import SqlUserGateway
from layers_showcase.infrastructure.repositories.user import UserRepository
from layers_showcase.services.user import UserService

if TYPE_CHECKING:
    from layers_showcase.config.settings import ShowcaseSettings
    from layers_showcase.infrastructure.gateway import PersistenceGateway

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DependencyRegistry:
    """Fully wired dependency graph for the user pipeline."""

    gateway: PersistenceGateway
    user_repository: UserRepository
    user_service: UserService
    user_facade: UserFacade

    @classmethod
    def build(cls, gateway: PersistenceGateway) -> DependencyRegistry:
        """Wire every layer on top of *gateway*."""
        repository = UserRepository(gateway)
        service = UserService(repository)
        facade = UserFacade(service)
        return cls(
            gateway=gateway,
            user_repository=repository,
            user_service=service,
            user_facade=facade,
        )

    @classmethod
    def from_settings(cls, settings: ShowcaseSettings) -> DependencyRegistry:
        """Build a registry over the SQL gateway configured by *settings*."""
        engine = init_database(settings.database_url)
        log.debug("registry.build", database_url=settings.database_url)
        return cls.build(SqlUserGateway(engine))

    def close(self) -> None:
        """Release the gateway's storage resources."""
        self.gateway.close()


_lock = threading.Lock()
_registry: DependencyRegistry | None = None


def get_registry(settings: ShowcaseSettings | None = None) -> DependencyRegistry:
    """Return the process-wide registry, creating it on first access.

    *settings* is only consulted when the registry is created; defaults
    come from :meth:`ShowcaseSettings.from_cli` with no overrides.
    """
    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _lock:
        if _registry is None:
            if settings is None:
                from layers_showcase.config.settings import ShowcaseSettings

                settings = ShowcaseSettings.from_cli()
            _registry = DependencyRegistry.from_settings(settings)
        return _registry


def set_registry(registry: DependencyRegistry) -> None:
    """Install *registry* as the process-wide instance (test harness use)."""
    global _registry
    with _lock:
        _registry = registry


def reset_registry() -> None:
    """Close and discard the process-wide registry."""
    global _registry
    with _lock:
        registry, _registry = _registry, None
    if registry is not None:
        registry.close()
