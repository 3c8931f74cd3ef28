"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. It is the explicit owner of the dependency registry
for a CLI run: the registry is built lazily on first use so ``--help``
and ``--version`` never touch the database, and closed when the root
context closes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layers_showcase.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from layers_showcase.config.settings import ShowcaseSettings
    from layers_showcase.facade.user import UserFacade
    from layers_showcase.registry import DependencyRegistry
    from layers_showcase.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShowcaseSettings) -> None:
        self.settings = settings
        self._registry: DependencyRegistry | None = None

        from layers_showcase.config.logging import configure_logging

        configure_logging(verbose=settings.debug_logging, log_json=settings.json_logging)

    @property
    def registry(self) -> DependencyRegistry:
        """The dependency registry (created lazily on first access)."""
        if self._registry is None:
            from layers_showcase.registry import DependencyRegistry

            self._registry = DependencyRegistry.from_settings(self.settings)
        return self._registry

    @property
    def facade(self) -> UserFacade:
        return self.registry.user_facade

    def close(self) -> None:
        if self._registry is not None:
            self._registry.close()
            self._registry = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
