"""Root CLI group for buildgate with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from buildgate import __version__
from buildgate.commands import register_commands
from buildgate.commands._context import AppContext
from buildgate.config.settings import GateSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="buildgate")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-p",
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to treat as the current directory.",
)
@click.option(
    "-s",
    "--settings-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Use this settings file instead of searching for one.",
)
@click.option(
    "--no-search-upward",
    is_flag=True,
    help="Only look for a settings file in the project directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    project_dir: Path | None,
    settings_file: Path | None,
    no_search_upward: bool,
) -> None:
    """Check that a directory is a build root before building."""
    settings = GateSettings.from_cli(
        config_path=config_path,
        project_dir=project_dir,
        settings_file=settings_file,
        search_upwards=False if no_search_upward else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
