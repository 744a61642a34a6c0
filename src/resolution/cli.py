"""Root CLI group for resolution with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from resolution import __version__
from resolution.commands import register_commands
from resolution.commands._context import AppContext
from resolution.config.settings import ResolutionSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="resolution")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--file",
    "store_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Override the resolutions CSV file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    store_file: Path | None,
) -> None:
    """Resolution is a command line tool that can be used to manage your
    New Year's resolutions.

    You can create, edit, delete and list your New Year's resolutions.
    """
    settings = ResolutionSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        store_file=store_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
