"""Repository abstractions for infrastructure data access."""

from layers_showcase.infrastructure.repositories.user import UserRepository

__all__ = ["UserRepository"]
