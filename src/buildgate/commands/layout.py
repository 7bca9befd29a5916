"""Command: show the resolved build layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildgate.commands._base import GateCommand
from buildgate.services.layout import inspect_layout

if TYPE_CHECKING:
    from buildgate.commands._context import AppContext


@click.command(
    "layout",
    cls=GateCommand,
    examples="""\
  buildgate layout
  buildgate --json layout
  buildgate -p src/module layout""",
)
@click.pass_obj
def layout(app: AppContext) -> None:
    """Show the build root, settings file, and build script in use."""
    app.emit(inspect_layout(app.resolver, app.invocation()))
