"""Root CLI group with global flags and command registration."""

from __future__ import annotations

import click

from layers_showcase import __version__
from layers_showcase.commands import register_commands
from layers_showcase.commands._context import AppContext
from layers_showcase.config.settings import ShowcaseSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="layers")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--database-url", default=None, help="Override the SQLAlchemy database URL.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    database_url: str | None,
) -> None:
    """layers: manage users through the layered pipeline."""
    ctx.ensure_object(dict)
    overrides: dict[str, object] = {}
    if database_url:
        overrides["database"] = {"url": database_url}
    settings = ShowcaseSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    ctx.call_on_close(ctx.obj.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
