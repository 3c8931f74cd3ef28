"""Subcommand modules for the layers CLI.

Provides register_commands() which uses deferred imports to keep
``layers --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from layers_showcase.commands.users import users

    cli.add_command(users)
