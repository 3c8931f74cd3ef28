"""Click base classes that add an ``--examples`` flag.

``--examples`` prints a block of sample invocations and exits, so
``--help`` can stay short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class ExamplesMixin:
    """Accept an ``examples=`` keyword and expose it as ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class ShowcaseCommand(ExamplesMixin, click.Command):
    """A command that can carry usage examples."""


class ShowcaseGroup(ExamplesMixin, click.Group):
    """A group whose subcommands are :class:`ShowcaseCommand` by default."""

    command_class = ShowcaseCommand
