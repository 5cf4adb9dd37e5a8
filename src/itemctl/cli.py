"""Root CLI group for itemctl with global flags and command registration."""

from __future__ import annotations

import click

from itemctl import __version__
from itemctl.commands import register_commands
from itemctl.commands._context import AppContext
from itemctl.config.settings import ItemSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="itemctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only (one identity per line).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and operation timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """itemctl — sort, compare, dedup, and split build item collections."""
    settings = ItemSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
