"""Command: build initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildgate.commands._base import GateCommand

if TYPE_CHECKING:
    from buildgate.commands._context import AppContext

_INIT_EXAMPLES = """\
  buildgate init
  buildgate init /path/to/project --name my-service
  buildgate init . --build-script
  buildgate --no-interact init --name demo /tmp/project"""


@click.command("init", cls=GateCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=None)
@click.option("--name", default=None, help="Build name (defaults to the directory name).")
@click.option(
    "--build-script/--no-build-script",
    default=False,
    help="Also create an empty root build script.",
)
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: str | None,
    name: str | None,
    build_script: bool,
) -> None:
    """Create a new build in a directory (default: the project directory)."""
    build_path = Path(path).resolve() if path else app.settings.project_dir

    if name is None and not app.settings.no_interact:
        name = click.prompt("Build name", default=build_path.name)

    from buildgate.services.init import InitService

    app.emit(
        InitService.init_build(
            build_path,
            app.scripts,
            name=name,
            with_build_script=build_script,
        )
    )
