"""Command group: user CRUD through the facade."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layers_showcase import actions
from layers_showcase.commands._base import ShowcaseGroup

if TYPE_CHECKING:
    from layers_showcase.commands._context import AppContext


@click.group(
    cls=ShowcaseGroup,
    examples="""\
  layers users create "Ada Lovelace"
  layers users list
  layers --json users get 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13""",
)
def users() -> None:
    """Create, read, update, and delete users."""


@users.command(
    "list",
    examples="""\
  layers users list
  layers -q users list
  layers --json users list""",
)
@click.pass_obj
def list_users(app: AppContext) -> None:
    """List all users in creation order."""
    app.emit(actions.get_all_users(app.facade))


@users.command(
    examples="""\
  layers users get 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13""",
)
@click.argument("user_id")
@click.pass_obj
def get(app: AppContext, user_id: str) -> None:
    """Show one user by ID (reports when the user does not exist)."""
    app.emit(actions.get_user(app.facade, user_id))


@users.command(
    examples="""\
  layers users create "Ada Lovelace"
  layers --json users create "Grace Hopper\"""",
)
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Create a user with NAME (1-100 characters)."""
    app.emit(actions.create_user(app.facade, {"name": name}))


@users.command(
    examples="""\
  layers users update 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13 "New Name\"""",
)
@click.argument("user_id")
@click.argument("name")
@click.pass_obj
def update(app: AppContext, user_id: str, name: str) -> None:
    """Rename the user with USER_ID to NAME."""
    app.emit(actions.update_user(app.facade, user_id, {"name": name}))


@users.command(
    examples="""\
  layers users delete 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13""",
)
@click.argument("user_id")
@click.pass_obj
def delete(app: AppContext, user_id: str) -> None:
    """Delete the user with USER_ID."""
    app.emit(actions.delete_user(app.facade, user_id))


@users.command(
    examples="""\
  layers users exists 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13
  layers -q users exists 7f0c2a9e-3b1d-4c55-9a0e-2d4b6f8e1a13""",
)
@click.argument("user_id")
@click.pass_obj
def exists(app: AppContext, user_id: str) -> None:
    """Report whether a user with USER_ID exists."""
    app.emit(actions.user_exists(app.facade, user_id))


@users.command(
    examples="""\
  layers users seed
  layers users seed --name "User One" --name "User Two\"""",
)
@click.option("--name", "names", multiple=True, help="Seed this name instead of the defaults (repeatable).")
@click.pass_obj
def seed(app: AppContext, names: tuple[str, ...]) -> None:
    """Populate the database with sample users."""
    if names:
        app.emit(actions.seed_users(app.facade, names))
    else:
        app.emit(actions.seed_users(app.facade))
